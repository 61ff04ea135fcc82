"""The playing field: a fixed square board of coloured cells."""

from __future__ import annotations

import pygame

from .colors import LIGHTGRAY, RAYWHITE, WHITE, Color, brightness, fade, get_colors


def _blend_rect(
    surface: pygame.Surface, rect: tuple[int, int, int, int], color: Color, width: int = 0
) -> None:
    x, y, w, h = rect
    if w <= 0 or h <= 0:
        return
    layer = pygame.Surface((w, h), pygame.SRCALPHA)
    pygame.draw.rect(layer, color, layer.get_rect(), width)
    surface.blit(layer, (x, y))


def _gradient_rect(
    surface: pygame.Surface, rect: tuple[int, int, int, int], top: Color, bottom: Color
) -> None:
    x, y, w, h = rect
    if w <= 0 or h <= 0:
        return
    layer = pygame.Surface((w, h), pygame.SRCALPHA)
    for line in range(h):
        t = line / (h - 1) if h > 1 else 0.0
        color = tuple(round(a + (b - a) * t) for a, b in zip(top, bottom))
        pygame.draw.line(layer, color, (0, line), (w - 1, line))
    surface.blit(layer, (x, y))


class Grid:
    """A 30 x 30 board; each cell holds 0 when empty or a block id."""

    def __init__(self) -> None:
        self.rows = 30
        self.cols = 30
        self.cell_width = 30
        self.cell_height = 30
        self.row_cleared = 0
        self.colors = get_colors()
        self.cells: list[list[int]] = []
        self.initialize()

    def initialize(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.cols for _ in range(self.rows)]

    def check_collision(self, row: int, col: int) -> bool:
        """Return True when the cell lies outside the board."""
        return not (0 <= row < self.rows and 0 <= col < self.cols)

    def is_empty(self, row: int, col: int) -> bool:
        """Return True when the cell holds no block."""
        if self.check_collision(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return self.cells[row][col] == 0

    def _is_row_full(self, row: int) -> bool:
        return all(self.cells[row])

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many were removed."""
        cleared = 0
        for row in reversed(range(self.rows)):
            if self._is_row_full(row):
                self.cells[row] = [0] * self.cols
                cleared += 1
                self.row_cleared += 1
            elif cleared > 0:
                self.cells[row + cleared] = self.cells[row]
                self.cells[row] = [0] * self.cols
        return cleared

    def pixel_size(self) -> tuple[int, int]:
        """Return the board's width and height in pixels."""
        return self.cols * self.cell_width, self.rows * self.cell_height

    def offset(self, screen_height: int) -> int:
        """Return the margin that centres the board vertically on a screen."""
        return int((screen_height - self.rows * self.cell_height) / 2)

    def draw(self, surface: pygame.Surface) -> None:
        """Render the cells and the decorative border onto ``surface``."""
        offset = self.offset(surface.get_height())
        cw, ch = self.cell_width, self.cell_height
        empty_color = fade(LIGHTGRAY, 0.2)
        for i, row in enumerate(self.cells):
            for j, value in enumerate(row):
                x = j * cw + offset
                y = i * ch + offset
                if value > 0:
                    base = self.colors[value]
                    _blend_rect(surface, (x - 2, y - 2, cw + 4, ch + 4), fade(base, 0.3))
                    _gradient_rect(surface, (x, y, cw - 1, ch - 1), base, brightness(base, -0.3))
                    _blend_rect(surface, (x, y, cw - 1, ch - 1), WHITE, 1)
                else:
                    _blend_rect(surface, (x, y, cw - 1, ch - 1), empty_color, 1)

        width, height = self.pixel_size()
        _blend_rect(
            surface,
            (offset - 6, offset - 6, width + 12, height + 12),
            fade(RAYWHITE, 0.3),
            2,
        )