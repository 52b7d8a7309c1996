"""Search and sort helpers shared by the record stores."""
from __future__ import annotations

import string
from enum import Enum
from typing import Callable, List, Sequence, TypeVar

T = TypeVar("T")

# Only A-Z are folded. Non-ASCII letters compare as-is.
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only."""
    return text.translate(_ASCII_FOLD)


def contains_fold(haystack: str, needle: str) -> bool:
    """Case-insensitive (ASCII) substring test. An empty needle matches everything."""
    return ascii_lower(needle) in ascii_lower(haystack)


def filter_contains(items: Sequence[T], needle: str, field: Callable[[T], str]) -> List[T]:
    """Items whose ``field`` contains ``needle``, in their original order."""
    return [item for item in items if contains_fold(field(item), needle)]


def selection_sort(items: Sequence[T], key: Callable[[T], int]) -> List[T]:
    """Return a new list sorted ascending by ``key``. Keys are expected to be unique."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            if key(result[j]) < key(result[smallest]):
                smallest = j
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result


def insertion_sort(items: Sequence[T], key: Callable[[T], int], descending: bool = False) -> List[T]:
    """Return a new list sorted by ``key``. Stable in both directions."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and _out_of_order(key(result[j]), key(current), descending):
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def _out_of_order(left: int, right: int, descending: bool) -> bool:
    return left < right if descending else left > right


def sort_records(items: Sequence[T], direction: SortDirection, key: Callable[[T], int]) -> List[T]:
    """Ascending uses selection sort, descending uses insertion sort."""
    if SortDirection(direction) is SortDirection.ASCENDING:
        return selection_sort(items, key)
    return insertion_sort(items, key, descending=True)
