"""Helpers for grouping catalogue values into ordered buckets."""

from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List

from errors import InvalidInputError

# Shared bucket for every value starting with a decimal digit.
DIGITS_GROUP = "[0-9]"


class GroupedResult(Mapping):
    """Mapping of group key -> values.

    Keys are iterated in ascending order no matter when they were added;
    values keep the order they were packed in.
    """

    def __init__(self) -> None:
        self._groups: Dict[str, List[str]] = {}

    def add(self, key: str, value: str) -> None:
        self._groups.setdefault(key, []).append(value)

    def __getitem__(self, key: str) -> List[str]:
        return self._groups[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._groups))

    def __len__(self) -> int:
        return len(self._groups)

    def __repr__(self) -> str:
        return f"GroupedResult({dict(self.items())!r})"


def pack_to_map(key: str, value: str, grouped: GroupedResult) -> None:
    """Append value under key, creating the key's bucket on first use."""
    grouped.add(key, value)


def first_letter_key(value: str) -> str:
    first = value[0]
    if first.isdecimal():
        return DIGITS_GROUP
    # Keys stay one character; "ß".upper() is "SS"
    upper = first.upper()
    return upper if len(upper) == 1 else first


def group_by_first_letter(values: Iterable[str]) -> GroupedResult:
    """Bucket values by their upper-cased first letter.

    Every value starting with a digit goes to the single DIGITS_GROUP bucket.
    Raises InvalidInputError for an empty value.
    """
    grouped = GroupedResult()
    for value in values:
        if not value:
            raise InvalidInputError("Values to group must not be empty.")
        pack_to_map(first_letter_key(value), value, grouped)
    return grouped
