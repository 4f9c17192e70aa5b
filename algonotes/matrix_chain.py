"""Matrix-chain multiplication order by dynamic programming."""

from __future__ import annotations

import math
from collections.abc import Sequence


def matrix_chain_order(dims: Sequence[int]) -> tuple[list[list[int]], list[list[int]]]:
    """Compute cost and split tables for matrices ``A1..An``.

    Matrix ``Ai`` has shape ``dims[i-1] x dims[i]``. Both tables are indexed
    from 1; ``split[i][j]`` is the best ``k`` to split ``Ai..Aj``.
    """
    if len(dims) < 2:
        raise ValueError("at least two dimensions are needed")
    n = len(dims) - 1
    cost = [[0] * (n + 1) for _ in range(n + 1)]
    split = [[0] * (n + 1) for _ in range(n + 1)]
    for length in range(2, n + 1):
        for i in range(1, n - length + 2):
            j = i + length - 1
            best: float = math.inf
            for k in range(i, j):
                q = cost[i][k] + cost[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                if q < best:
                    best = q
                    split[i][j] = k
            cost[i][j] = int(best)
    return cost, split


def optimal_parens(split: Sequence[Sequence[int]], i: int, j: int) -> str:
    """Render the parenthesization of ``Ai..Aj`` from the split table."""
    if i == j:
        return f"A{i}"
    k = split[i][j]
    return f"({optimal_parens(split, i, k)}*{optimal_parens(split, k + 1, j)})"


def optimal_parenthesization(dims: Sequence[int]) -> str:
    """Return the full result line, e.g. ``A15 = ((A1*A2)*...)``."""
    _, split = matrix_chain_order(dims)
    n = len(dims) - 1
    return f"A1{n} = {optimal_parens(split, 1, n)}"