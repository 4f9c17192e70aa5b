"""0/1 knapsack solved with a dynamic-programming table."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item that can be put into the knapsack."""

    weight: int
    benefit: int


def knapsack_table(items: Iterable[Item], capacity: int) -> list[list[int]]:
    """Build the benefit table.

    Row ``i`` covers the first ``i`` items and column ``w`` a capacity of
    ``w``. Row 0 and column 0 are all zeros.
    """
    if capacity < 0:
        raise ValueError(f"capacity must not be negative, got {capacity}")
    table = [[0] * (capacity + 1)]
    for item in items:
        if item.weight < 0:
            raise ValueError(f"item weight must not be negative, got {item.weight}")
        previous = table[-1]
        row = [0]
        for w in range(1, capacity + 1):
            best = previous[w]
            if item.weight <= w:
                candidate = item.benefit + previous[w - item.weight]
                if candidate > best:
                    best = candidate
            row.append(best)
        table.append(row)
    return table


def chosen_items(
    table: Sequence[Sequence[int]], items: Sequence[Item], capacity: int
) -> list[bool]:
    """Trace the table back and flag which items are taken."""
    items = list(items)
    if len(table) != len(items) + 1:
        raise ValueError("table does not match the number of items")
    taken = [False] * len(items)
    remaining = capacity
    for i in range(len(items), 0, -1):
        if table[i][remaining] != table[i - 1][remaining]:
            taken[i - 1] = True
            remaining -= items[i - 1].weight
    return taken


def format_table(table: Iterable[Iterable[int]]) -> str:
    """Render the table with each cell followed by a tab, one row per line."""
    return "".join("".join(f"{cell}\t" for cell in row) + "\n" for row in table)