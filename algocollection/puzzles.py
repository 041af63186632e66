"""The Tower of Hanoi."""

from typing import NamedTuple


class Move(NamedTuple):
    """Moving ``disk`` from rod ``source`` to rod ``target``."""

    disk: int
    source: str
    target: str


def tower_of_hanoi(
    disks: int, source: str = "A", target: str = "C", auxiliary: str = "B"
) -> list[Move]:
    """Return the moves that carry ``disks`` disks from ``source`` to ``target``.

    Disks are numbered from 1, the smallest, upwards.
    """
    if disks < 0:
        raise ValueError(f"number of disks must not be negative, got {disks}")
    moves: list[Move] = []

    def solve(n: int, start: str, end: str, spare: str) -> None:
        if n == 0:
            return
        solve(n - 1, start, spare, end)
        moves.append(Move(n, start, end))
        solve(n - 1, spare, end, start)

    solve(disks, source, target, auxiliary)
    return moves