import pytest

from algonotes.hanoi import Move, format_move, hanoi_moves


def test_two_disks():
    assert list(hanoi_moves(2)) == [Move(1, 1, 2), Move(2, 1, 3), Move(1, 2, 3)]


def test_format_move():
    assert format_move(Move(1, 1, 3)) == "1: 1 -> 3"


def test_no_disks():
    assert list(hanoi_moves(0)) == []


@pytest.mark.parametrize("n", [1, 3, 5, 7])
def test_moves_are_legal_and_complete(n):
    pegs = {1: list(range(n, 0, -1)), 2: [], 3: []}
    moves = list(hanoi_moves(n))
    assert len(moves) == 2**n - 1
    for move in moves:
        disk = pegs[move.source].pop()
        assert disk == move.disk
        assert not pegs[move.target] or pegs[move.target][-1] > disk
        pegs[move.target].append(disk)
    assert pegs == {1: [], 2: [], 3: list(range(n, 0, -1))}


def test_custom_pegs():
    moves = list(hanoi_moves(1, "a", "b", "c"))
    assert moves == [Move(1, "a", "c")]