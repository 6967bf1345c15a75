# oddments

A small library of independent tools:

- `oddments.iters` – lazy helpers for working with iterables;
- `oddments.minmaxheap` – a binary heap that gives access to both its
  smallest and its largest element.

The package has no runtime dependencies and supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Iterator helpers

The helpers pull from their source only as far as they need to.

### Counting without counting everything

`count_is` (in `oddments.iters.count_is`) compares the number of items in an
iterable with a non-negative integer, stopping as soon as the answer is
known. Each comparison continues from where the previous one stopped.

```python
from itertools import count
from oddments.iters.count_is import count_is

count_is(count()) > 2        # True, after reading only three items
count_is(range(3)) == 3      # True
count_is(range(5)).compare(2)   # 1: -1, 0 or 1 as the length is less, equal or greater
```

`count_satisfies` (in `oddments.iters.count_satisfies`) takes a function that
builds a condition from an `N` placeholder and evaluates it the same way.
`N` offers `eq`, `ne`, `lt`, `gt`, `le` and `ge`, and the comparison
operators. Conditions combine with `and_`, `or_` and `not_`, or with `&`,
`|` and `~`:

```python
from oddments.iters.count_satisfies import count_satisfies

count_satisfies(range(10), lambda n: n.lt(3))                  # False
count_satisfies(range(4), lambda n: n.gt(1).and_(n.ne(3)))     # True
count_satisfies(range(4), lambda n: (n < 2) | (n == 4))        # False
```

The conditions themselves are the classes `Eq`, `Lt`, `Gt`, `Not`, `Or` and
`And` of `oddments.iters.evaluation`; each has an `evaluate(iterable)` method.

### Splitting one iterable into two

`fork` (in `oddments.iters.fork`) returns two iterators that each see every
item of the source, which is read only once; items are buffered only while
one iterator is ahead of the other. Closing one of them (`close()`, or
leaving a `with` block) drops its buffer and lets the other run without
buffering.

```python
from oddments.iters.fork import fork

first, second = fork(iter("ab"))
list(first)      # ['a', 'b']
list(second)     # ['a', 'b']
```

### Leaving out the end of an iterable

`tail_skip` (in `oddments.iters.tail_skip`) yields every item except the last
`n`, holding back at most `n` items at a time:

```python
from oddments.iters.tail_skip import tail_skip

list(tail_skip(range(1, 11), 3))   # [1, 2, 3, 4, 5, 6, 7]
```

### Grouping

`group_into_dict` and `group_into_sorted_dict` (in `oddments.iters.group_into`)
gather items by a key function. A `factory` turns each group's list of items
into its collection (a list by default). The first keeps keys in the order
they are first met; the second returns them sorted.

```python
from oddments.iters.group_into import group_into_dict, group_into_sorted_dict

group_into_dict(["apple", "avocado", "banana"], key=lambda w: w[0])
# {'a': ['apple', 'avocado'], 'b': ['banana']}

group_into_sorted_dict([3, 1, 2, 4], key=lambda x: x % 2, factory=sum)
# {0: 6, 1: 4}
```

## Min-max binary heap

`MinMaxBinaryHeap` (in `oddments.minmaxheap.minmax`) keeps its elements in a
min heap and a max heap that share their entries, so both ends are available
in logarithmic time:

```python
from oddments.minmaxheap.minmax import MinMaxBinaryHeap

heap = MinMaxBinaryHeap([5, 1, 4, 2, 3])
heap.pop_min()                   # 1
heap.pop_max()                   # 5
list(heap.drain_sorted_asc())    # [2, 3, 4]
len(heap)                        # 0
```

It also offers `peek_min` and `peek_max`, `push` and `extend`, `retain`,
`clear`, `append` (moving every element of another heap into this one),
`drain`, `drain_sorted_desc`, and `iter_sorted_asc` / `iter_sorted_desc`,
which leave the heap unchanged. Iterating over the heap gives its elements
in storage order, largest first.

`peek_min_mut` and `peek_max_mut` return a `PeekMut` (in
`oddments.minmaxheap.peek`), or None when the heap is empty. Assigning to its
`value` replaces the element and puts both heaps back in order at once;
`pop()` removes it. Used in a `with` block, the handle can no longer be used
after the block.

```python
heap = MinMaxBinaryHeap([1, 2, 3])
with heap.peek_min_mut() as top:
    top.value = 4
heap.peek_min()    # 2
heap.peek_max()    # 4
```

`oddments.minmaxheap.heap` holds the building blocks: `Entry`, `HeapOrder`
and the single-order `Heap`.

## What the package does not do

This is a library only: it installs no command. It has no interlace pattern
drawer, no side-by-side comparison of two iterables, no predicate-based
splitting of one iterable into two, and no helper for taking just the last
items of an iterable. The `oddments.interlace` sub-package is empty.