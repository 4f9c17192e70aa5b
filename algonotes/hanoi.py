"""Towers of Hanoi move generation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Move:
    """Move of ``disk`` from peg ``source`` to peg ``target``."""

    disk: int
    source: int
    target: int


def hanoi_moves(
    n: int, source: int = 1, spare: int = 2, target: int = 3
) -> Iterator[Move]:
    """Yield the moves that carry ``n`` disks from ``source`` to ``target``."""
    if n > 0:
        yield from hanoi_moves(n - 1, source, target, spare)
        yield Move(n, source, target)
        yield from hanoi_moves(n - 1, spare, source, target)


def format_move(move: Move) -> str:
    """Render a move as ``disk: source -> target``."""
    return f"{move.disk}: {move.source} -> {move.target}"