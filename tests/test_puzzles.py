import pytest
from hypothesis import given
from hypothesis import strategies as st

from algocollection.puzzles import Move, tower_of_hanoi


def test_single_disk():
    assert tower_of_hanoi(1) == [Move(1, "A", "C")]


def test_no_disks():
    assert tower_of_hanoi(0) == []


def test_negative_rejected():
    with pytest.raises(ValueError):
        tower_of_hanoi(-1)


@given(st.integers(1, 8))
def test_moves_are_legal_and_finish_on_target(disks):
    rods = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    moves = tower_of_hanoi(disks, "A", "C", "B")
    assert len(moves) == 2 ** disks - 1
    for move in moves:
        assert rods[move.source][-1] == move.disk
        rods[move.source].pop()
        assert not rods[move.target] or rods[move.target][-1] > move.disk
        rods[move.target].append(move.disk)
    assert rods["C"] == list(range(disks, 0, -1))
    assert rods["A"] == [] and rods["B"] == []


def test_custom_rod_names():
    moves = tower_of_hanoi(2, "x", "z", "y")
    assert {m.source for m in moves} | {m.target for m in moves} == {"x", "y", "z"}
    assert moves[-1].target == "z"


@given(st.integers(1, 8))
def test_largest_disk_moves_once_in_the_middle(disks):
    moves = tower_of_hanoi(disks)
    largest = [i for i, m in enumerate(moves) if m.disk == disks]
    assert largest == [len(moves) // 2]
    assert moves[largest[0]] == Move(disks, "A", "C")