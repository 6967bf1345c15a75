from oddments.iters.group_into import group_into_dict, group_into_sorted_dict

INPUT = "the quick brown fox jumps over the lazy dog"

EXPECTED_VOWELS = "euioouoeeao"
EXPECTED_CONSONANTS = "thqckbrwnfxjmpsvrthlzydg"
EXPECTED_WHITESPACE = "        "


def key_fn(c):
    if c == " ":
        return "whitespace"
    if c in "aeiou":
        return "vowels"
    return "consonants"


def test_group_into_dict():
    grouped = group_into_dict(INPUT, key_fn, "".join)

    assert set(grouped) == {"vowels", "consonants", "whitespace"}
    assert grouped["vowels"] == EXPECTED_VOWELS
    assert grouped["consonants"] == EXPECTED_CONSONANTS
    assert grouped["whitespace"] == EXPECTED_WHITESPACE


def test_group_into_dict_keeps_first_seen_key_order():
    grouped = group_into_dict(INPUT, key_fn, "".join)
    assert list(grouped) == ["consonants", "vowels", "whitespace"]


def test_group_into_sorted_dict():
    grouped = group_into_sorted_dict(INPUT, key_fn, "".join)

    assert list(grouped) == ["consonants", "vowels", "whitespace"]
    assert grouped["vowels"] == EXPECTED_VOWELS
    assert grouped["consonants"] == EXPECTED_CONSONANTS
    assert grouped["whitespace"] == EXPECTED_WHITESPACE


def test_sorted_dict_orders_keys():
    grouped = group_into_sorted_dict([3, 1, 2, 5], lambda n: -n)
    assert list(grouped) == [-5, -3, -2, -1]
    assert grouped[-3] == [3]


def test_default_factory_is_list():
    grouped = group_into_dict([1, 2, 3, 4, 5], lambda n: n % 2)
    assert grouped == {1: [1, 3, 5], 0: [2, 4]}


def test_empty_input():
    assert group_into_dict([], key_fn) == {}
    assert group_into_sorted_dict([], key_fn) == {}