"""Binary search and bound lookups over sorted sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def binary_search(values: Sequence[Any], key: Any) -> int:
    """Return an index holding ``key``, or -1 when it is absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Return the first index whose value is not less than ``key``."""
    low, high = 0, len(values) - 1
    result = len(values)
    while low <= high:
        mid = (low + high) // 2
        if values[mid] < key:
            low = mid + 1
        else:
            result = mid
            high = mid - 1
    return result


def upper_bound(values: Sequence[Any], key: Any) -> int:
    """Return the first index whose value is greater than ``key``."""
    low, high = 0, len(values) - 1
    result = len(values)
    while low <= high:
        mid = (low + high) // 2
        if values[mid] <= key:
            low = mid + 1
        else:
            result = mid
            high = mid - 1
    return result