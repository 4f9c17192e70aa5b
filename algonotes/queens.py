"""N-queens by backtracking, one queen per row."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def can_place(columns: Sequence[int], row: int, column: int) -> bool:
    """Whether a queen fits at ``row``/``column`` given queens in rows before it.

    ``columns[r - 1]`` is the column of the queen in row ``r``; rows and
    columns are numbered from 1.
    """
    return all(
        placed != column and abs(placed - column) != abs(r - row)
        for r, placed in enumerate(columns[: row - 1], start=1)
    )


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` queens as a tuple of 1-based columns."""
    columns: list[int] = []

    def extend(row: int) -> Iterator[tuple[int, ...]]:
        for column in range(1, n + 1):
            if can_place(columns, row, column):
                columns.append(column)
                if row == n:
                    yield tuple(columns)
                else:
                    yield from extend(row + 1)
                columns.pop()

    yield from extend(1)


def format_solution(number: int, columns: Sequence[int]) -> str:
    """Describe one solution, numbered from 1."""
    lines = [f"Way no  {number}  is :"]
    lines.extend(
        f"Queen [{q}]  sits in Row {q} , column {column}  "
        for q, column in enumerate(columns, start=1)
    )
    return "\n".join(lines) + "\n\n"