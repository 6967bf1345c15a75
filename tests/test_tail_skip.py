import itertools

import pytest

from oddments.iters.tail_skip import tail_skip


def test_skips_last_three_of_ten():
    assert list(tail_skip(range(1, 11), 3)) == list(range(1, 8))


def test_skipping_exactly_all_gives_nothing():
    assert list(tail_skip(range(1, 4), 3)) == []


def test_skipping_more_than_all_gives_nothing():
    assert list(tail_skip(range(1, 4), 5)) == []


def test_skip_zero_keeps_everything():
    assert list(tail_skip("abc", 0)) == ["a", "b", "c"]


def test_is_lazy_on_endless_source():
    result = list(itertools.islice(tail_skip(itertools.count(), 2), 5))
    assert result == [0, 1, 2, 3, 4]


def test_reads_only_n_ahead():
    source = iter(range(10))
    skipped = tail_skip(source, 2)
    assert next(skipped) == 0
    assert next(source) == 3


def test_negative_n_is_rejected():
    with pytest.raises(ValueError):
        tail_skip([1, 2, 3], -1)