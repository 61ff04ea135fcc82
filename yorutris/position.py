"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Position:
    """A cell on the board, addressed by row and column."""

    row: int
    col: int

    def shifted(self, rows: int, cols: int) -> Position:
        """Return the position moved by ``rows`` and ``cols``."""
        return Position(self.row + rows, self.col + cols)