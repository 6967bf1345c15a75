import pytest

from oddments.iters.count_is import CountIs, count_is


class _Counted:
    def __init__(self, length):
        self.length = length
        self.consumed = 0

    def __iter__(self):
        for _ in range(self.length):
            self.consumed += 1
            yield None


def _run(real, op):
    source = _Counted(real)
    result = op(count_is(source))
    return result, source.consumed


EQ_CASES = [
    (0, 0, True, 0), (0, 1, False, 0),
    (1, 0, False, 1), (1, 1, True, 1), (1, 2, False, 1),
    (2, 0, False, 1), (2, 1, False, 2), (2, 2, True, 2), (2, 3, False, 2),
    (3, 0, False, 1), (3, 1, False, 2), (3, 2, False, 3), (3, 3, True, 3), (3, 4, False, 3),
]

LT_CASES = [
    (0, 0, False, 0), (0, 1, True, 0),
    (1, 0, False, 0), (1, 1, False, 1), (1, 2, True, 1),
    (2, 0, False, 0), (2, 1, False, 1), (2, 2, False, 2), (2, 3, True, 2),
    (3, 0, False, 0), (3, 1, False, 1), (3, 2, False, 2), (3, 3, False, 3), (3, 4, True, 3),
]

GT_CASES = [
    (0, 0, False, 0), (0, 1, False, 0),
    (1, 0, True, 1), (1, 1, False, 1), (1, 2, False, 1),
    (2, 0, True, 1), (2, 1, True, 2), (2, 2, False, 2), (2, 3, False, 2),
    (3, 0, True, 1), (3, 1, True, 2), (3, 2, True, 3), (3, 3, False, 3), (3, 4, False, 3),
]


@pytest.mark.parametrize("real, tested, expected, consumed", EQ_CASES)
def test_eq(real, tested, expected, consumed):
    assert _run(real, lambda c: c == tested) == (expected, consumed)


@pytest.mark.parametrize("real, tested, expected, consumed", EQ_CASES)
def test_ne(real, tested, expected, consumed):
    assert _run(real, lambda c: c != tested) == (not expected, consumed)


@pytest.mark.parametrize("real, tested, expected, consumed", LT_CASES)
def test_lt(real, tested, expected, consumed):
    assert _run(real, lambda c: c < tested) == (expected, consumed)


@pytest.mark.parametrize("real, tested, expected, consumed", LT_CASES)
def test_ge(real, tested, expected, consumed):
    assert _run(real, lambda c: c >= tested) == (not expected, consumed)


@pytest.mark.parametrize("real, tested, expected, consumed", GT_CASES)
def test_gt(real, tested, expected, consumed):
    assert _run(real, lambda c: c > tested) == (expected, consumed)


@pytest.mark.parametrize("real, tested, expected, consumed", GT_CASES)
def test_le(real, tested, expected, consumed):
    assert _run(real, lambda c: c <= tested) == (not expected, consumed)


@pytest.mark.parametrize(
    "real, tested, expected, consumed",
    [
        (0, 0, 0, 0), (0, 1, -1, 0),
        (1, 0, 1, 1), (1, 1, 0, 1), (1, 2, -1, 1),
        (2, 0, 1, 1), (2, 1, 1, 2), (2, 2, 0, 2), (2, 3, -1, 2),
        (3, 0, 1, 1), (3, 1, 1, 2), (3, 2, 1, 3), (3, 3, 0, 3), (3, 4, -1, 3),
    ],
)
def test_compare(real, tested, expected, consumed):
    assert _run(real, lambda c: c.compare(tested)) == (expected, consumed)


def test_reflected_comparison_with_int_on_the_left():
    assert (2 > count_is(range(5))) is False
    assert (7 > count_is(range(5))) is True


def test_negative_count_is_rejected():
    with pytest.raises(ValueError):
        count_is(range(3)) < -1


def test_compare_rejects_non_integer():
    with pytest.raises(TypeError):
        count_is(range(3)).compare("3")


def test_comparison_with_non_integer_is_not_equal():
    assert (count_is(range(3)) == "3") is False


def test_is_unhashable():
    with pytest.raises(TypeError):
        hash(CountIs([]))