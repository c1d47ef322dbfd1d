import pytest

from errors import InvalidInputError
from grouping import DIGITS_GROUP, GroupedResult, group_by_first_letter, pack_to_map


def test_pack_to_map_keeps_insertion_order_of_values():
    grouped = GroupedResult()
    pack_to_map("b", "second", grouped)
    pack_to_map("a", "first", grouped)
    pack_to_map("b", "third", grouped)

    assert grouped["b"] == ["second", "third"]
    assert grouped["a"] == ["first"]
    assert len(grouped) == 2

def test_keys_iterate_in_ascending_order():
    grouped = GroupedResult()
    for key in ["Zelazny", "Asimov", "Le Guin", "Banks"]:
        pack_to_map(key, "x", grouped)

    assert list(grouped) == ["Asimov", "Banks", "Le Guin", "Zelazny"]
    assert [k for k, _ in grouped.items()] == ["Asimov", "Banks", "Le Guin", "Zelazny"]

def test_group_by_first_letter_upper_cases_keys():
    grouped = group_by_first_letter(["dune", "Dracula", "emma"])

    assert grouped == {"D": ["dune", "Dracula"], "E": ["emma"]}

def test_digits_share_one_group():
    grouped = group_by_first_letter(["1984", "2001", "Dune", "451"])

    assert grouped[DIGITS_GROUP] == ["1984", "2001", "451"]
    assert set(grouped) == {"D", DIGITS_GROUP}

def test_digit_group_sorts_after_upper_case_letters():
    # '[' follows 'Z' in code point order
    grouped = group_by_first_letter(["1984", "Dune"])

    assert list(grouped) == ["D", "[0-9]"]

def test_no_empty_buckets_and_all_values_kept():
    titles = ["Dune", "dune", "Emma", "1984", "Emma"]
    grouped = group_by_first_letter(titles)

    assert all(grouped[key] for key in grouped)
    assert sorted(v for values in grouped.values() for v in values) == sorted(titles)

def test_keys_stay_single_characters():
    # "ß" has no one-letter upper-case form
    grouped = group_by_first_letter(["ße", "Straße"])

    assert grouped == {"ß": ["ße"], "S": ["Straße"]}
    assert list(grouped) == ["S", "ß"]

def test_empty_value_is_rejected():
    with pytest.raises(InvalidInputError):
        group_by_first_letter(["Dune", ""])

def test_empty_input_gives_empty_result():
    assert len(group_by_first_letter([])) == 0
