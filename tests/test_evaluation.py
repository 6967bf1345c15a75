import pytest

from oddments.iters.evaluation import And, Eq, Gt, Lt, Not, Or


class Counting:
    def __init__(self, length):
        self.length = length
        self.consumed = 0

    def __iter__(self):
        for _ in range(self.length):
            self.consumed += 1
            yield None


@pytest.mark.parametrize("length", range(6))
@pytest.mark.parametrize("tested", range(5))
def test_comparisons_agree_with_length(length, tested):
    assert Eq(tested).evaluate(range(length)) == (length == tested)
    assert Lt(tested).evaluate(range(length)) == (length < tested)
    assert Gt(tested).evaluate(range(length)) == (length > tested)
    assert Not(Eq(tested)).evaluate(range(length)) == (length != tested)


@pytest.mark.parametrize("length", range(6))
@pytest.mark.parametrize("tested", range(5))
def test_consumption_never_exceeds_needed(length, tested):
    source = Counting(length)
    Lt(tested).evaluate(source)
    assert source.consumed <= min(length, tested)

    source = Counting(length)
    Gt(tested).evaluate(source)
    assert source.consumed <= min(length, tested + 1)


def test_evaluate_leaves_rest_of_iterator():
    iterator = iter(range(10))
    assert Lt(3).evaluate(iterator) is False
    assert next(iterator) == 3


def test_evaluate_count_stops_when_settled():
    value, following = Eq(2).evaluate_count(3)
    assert value is False
    assert following is None

    value, following = Lt(2).evaluate_count(0)
    assert value is True
    assert following == Lt(2)


def test_not_flips_value():
    value, following = Not(Gt(1)).evaluate_count(0)
    assert value is True
    assert following == Not(Gt(1))


def test_operators_build_same_trees():
    assert ~Eq(1) == Not(Eq(1))
    assert Eq(1) | Lt(2) == Or(Eq(1), Lt(2))
    assert Eq(1) & Lt(2) == And(Eq(1), Lt(2))
    assert Eq(1).not_() == ~Eq(1)
    assert Eq(1).or_(Lt(2)) == Eq(1) | Lt(2)
    assert Eq(1).and_(Lt(2)) == Eq(1) & Lt(2)
    assert Or(Eq(1), Eq(2)) != And(Eq(1), Eq(2))


def test_or_drops_settled_false_side():
    value, following = Or(Gt(5), Lt(0)).evaluate_count(0)
    assert value is False
    assert following == Or(Gt(5), None)


def test_and_gives_up_when_settled_side_is_false():
    value, following = And(Gt(5), Lt(0)).evaluate_count(0)
    assert value is False
    assert following is None


@pytest.mark.parametrize("length", range(8))
def test_combinations_agree_with_length(length):
    assert (Lt(2) | Eq(4)).evaluate(range(length)) == (length < 2 or length == 4)
    assert (Gt(1) & ~Eq(3)).evaluate(range(length)) == (length > 1 and length != 3)


def test_binary_needs_an_operand():
    with pytest.raises(ValueError):
        Or(None, None)


def test_operator_with_non_evaluator():
    with pytest.raises(TypeError):
        Eq(1) | 3