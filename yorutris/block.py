"""A falling piece: a set of rotations positioned on the board."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import pygame

from .colors import WHITE, Color, fade, get_colors
from .grid import Grid
from .position import Position

GRID_SIZE = 30


def _blend_rect(surface: pygame.Surface, rect: tuple[int, int, int, int], color: Color) -> None:
    x, y, w, h = rect
    if w <= 0 or h <= 0:
        return
    layer = pygame.Surface((w, h), pygame.SRCALPHA)
    layer.fill(color)
    surface.blit(layer, (x, y))


class Block:
    """A piece with one cell layout per rotation and an offset on the board."""

    def __init__(
        self,
        shapes: Iterable[Sequence[Position]] = (),
        block_id: int = 0,
        start_col: int = 0,
    ) -> None:
        self.size = 30
        self.rotation = 0
        self.rows_offset = 0
        self.cols_offset = 0
        self.id = block_id
        self.colors = get_colors()
        self.shapes: list[tuple[Position, ...]] = [tuple(shape) for shape in shapes]
        if start_col:
            self.move(0, start_col)

    def move(self, rows: int, cols: int) -> bool:
        """Shift the piece; undo the shift and return False if it would leave the board."""
        self.rows_offset += rows
        self.cols_offset += cols
        if all(self.is_valid_position(p.row, p.col) for p in self.cells()):
            return True
        self.rows_offset -= rows
        self.cols_offset -= cols
        return False

    def is_at_final_position(self, grid: Grid) -> bool:
        """Return True when the piece rests on the floor or on another piece."""
        return any(
            p.row + 1 >= GRID_SIZE or not grid.is_empty(p.row + 1, p.col)
            for p in self.cells()
        )

    def is_valid_position(self, row: int, col: int) -> bool:
        """Return True when the cell lies on the board."""
        return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE

    def cells(self) -> list[Position]:
        """Return the board cells covered in the current rotation."""
        return [
            p.shifted(self.rows_offset, self.cols_offset)
            for p in self.shapes[self.rotation]
        ]

    def rotate(self) -> None:
        """Advance to the next rotation, wrapping to the first."""
        self.rotation += 1
        if self.rotation == len(self.shapes):
            self.rotation = 0

    def undo_rotate(self) -> None:
        """Step back to the previous rotation, wrapping to the last."""
        self.rotation -= 1
        if self.rotation == -1:
            self.rotation = len(self.shapes) - 1

    def landing_cells(self, grid: Grid) -> list[Position]:
        """Return the cells the piece would occupy after dropping straight down."""
        landing = self.cells()
        while all(
            self.is_valid_position(p.row + 1, p.col) and grid.is_empty(p.row + 1, p.col)
            for p in landing
        ):
            landing = [p.shifted(1, 0) for p in landing]
        return landing

    def _offset(self, surface: pygame.Surface) -> int:
        return int((surface.get_height() - GRID_SIZE * self.size) / 2)

    def draw(self, surface: pygame.Surface, off_x: int, off_y: int) -> None:
        """Render the piece, shifted by ``off_x`` and ``off_y`` pixels."""
        offset = self._offset(surface)
        color = self.colors[self.id]
        for p in self.cells():
            x = p.col * self.size + offset + off_x
            y = p.row * self.size + offset + off_y
            _blend_rect(surface, (x, y, self.size - 1, self.size - 1), color)

    def draw_landing_preview(self, surface: pygame.Surface, grid: Grid) -> None:
        """Mark where the piece would land with small translucent squares."""
        offset = self._offset(surface)
        quarter = self.size // 4
        half = self.size // 2
        marker = fade(WHITE, 0.5)
        for p in self.landing_cells(grid):
            x = p.col * self.size + offset + quarter
            y = p.row * self.size + offset + quarter
            _blend_rect(surface, (x, y, half, half), marker)