"""A sparse matrix stored as a list of rows, each holding its non-zero entries."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional


class SparseMatrix:
    """Rows of ``(column, value)`` pairs for the non-zero cells; indices start at 1."""

    def __init__(self, rows: Iterable[Iterable[tuple[int, int]]]) -> None:
        self._rows = [list(row) for row in rows]

    @classmethod
    def from_dense(cls, rows: Iterable[Sequence[int]]) -> SparseMatrix:
        """Build a sparse matrix from a dense grid, keeping only non-zero cells."""
        return cls(
            [
                (column, value)
                for column, value in enumerate(row, start=1)
                if value != 0
            ]
            for row in rows
        )

    def entries(self) -> list[tuple[int, int, int]]:
        """Return every non-zero cell as ``(row, column, value)``, row by row."""
        return [
            (row_number, column, value)
            for row_number, row in enumerate(self._rows, start=1)
            for column, value in row
        ]

    def row_counts(self) -> list[int]:
        """Return the number of non-zero cells in each row."""
        return [len(row) for row in self._rows]

    def densest_row(self) -> Optional[int]:
        """Return the first row with the most non-zero cells, or None if there are none."""
        best_row: Optional[int] = None
        best_count = 0
        for row_number, count in enumerate(self.row_counts(), start=1):
            if count > best_count:
                best_row, best_count = row_number, count
        return best_row