"""Classic comparison sorts over lists of comparable values."""

from __future__ import annotations

import heapq
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional

_Key = Optional[Callable[[Any], Any]]


def insertion_position(values: Sequence[Any], high: int, key: Any) -> int:
    """Find where ``key`` goes among the sorted ``values[0..high]``.

    If an equal element is found, the position just after it is returned.
    """
    low = 0
    while low <= high:
        mid = (low + high) // 2
        if key == values[mid]:
            return mid + 1
        if key > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    if low < len(values) and key > values[low]:
        return low + 1
    return low


def binary_insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort ascending by inserting each element at a binary-searched position."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        position = insertion_position(result, i - 1, key)
        del result[i]
        result.insert(position, key)
    return result


def insertion_sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort in descending order by straight insertion."""
    result: list[Any] = []
    for key in values:
        position = len(result)
        while position > 0 and result[position - 1] < key:
            position -= 1
        result.insert(position, key)
    return result


def merge(left: Iterable[Any], right: Iterable[Any]) -> list[Any]:
    """Merge two ascending sequences; on ties the left element comes first."""
    return list(heapq.merge(left, right))


def _merge_sort_by(values: Sequence[Any], key: _Key = None) -> list[Any]:
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    left = _merge_sort_by(items[:mid], key)
    right = _merge_sort_by(items[mid:], key)
    return list(heapq.merge(left, right, key=key))


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Stable ascending merge sort."""
    return _merge_sort_by(list(values))


def _partition(items: list[Any], low: int, high: int, key: _Key) -> int:
    def sort_key(index: int) -> Any:
        item = items[index]
        return item if key is None else key(item)

    pivot = sort_key(low)
    i, j = low, high
    while i < j:
        while sort_key(i) <= pivot:
            i += 1
            if i >= high:
                break
        while sort_key(j) > pivot:
            j -= 1
            if j <= low:
                break
        if i < j:
            items[i], items[j] = items[j], items[i]
    items[low], items[j] = items[j], items[low]
    return j


def _quick_sort_by(values: Iterable[Any], key: _Key = None) -> list[Any]:
    items = list(values)

    def sort_range(low: int, high: int) -> None:
        if low < high:
            pivot_at = _partition(items, low, high, key)
            sort_range(low, pivot_at - 1)
            sort_range(pivot_at + 1, high)

    sort_range(0, len(items) - 1)
    return items


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Ascending quicksort using the first element of each range as pivot."""
    return _quick_sort_by(values)


def selection_sort_descending(values: Iterable[Any]) -> list[Any]:
    """Sort in descending order by repeatedly selecting the largest element."""
    remaining = list(values)
    result: list[Any] = []
    while remaining:
        largest = max(range(len(remaining)), key=remaining.__getitem__)
        result.append(remaining.pop(largest))
    return result