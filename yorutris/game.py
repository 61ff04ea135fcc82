"""Game rules: falling pieces, locking, line clears, scoring and levels."""

from __future__ import annotations

import copy
import random
from collections.abc import Callable
from enum import Enum, auto

import pygame

from .block import Block
from .blocks import all_blocks, basic_blocks
from .grid import Grid

SOUND_ROTATE = "rotate"
SOUND_CLEAR = "clear"
SOUND_GAME_OVER = "game_over"

_LINE_SCORES = {1: 100, 2: 300, 3: 500, 4: 1000}


class Action(Enum):
    """A player input handled by :meth:`Game.update`."""

    NONE = auto()
    LEFT = auto()
    RIGHT = auto()
    DOWN = auto()
    ROTATE = auto()
    RESTART = auto()


class Game:
    """State of one running game.

    ``play_sound`` is called with ``"rotate"``, ``"clear"`` or ``"game_over"``
    whenever the matching sound effect should be played.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        play_sound: Callable[[str], None] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._play_sound = play_sound if play_sound is not None else (lambda name: None)
        self.grid = Grid()
        self.score = 0
        self._level = 1
        self.game_over = False
        self.score_saved = False
        self.current_block = self.random_block()
        self.next_block = self.random_block()

    def level(self) -> int:
        """Return the level reached with the current score."""
        self._level = self.score // 250 + 1
        return self._level

    def speed(self) -> float:
        """Return the seconds between automatic drops; shrinks as the score grows."""
        return max(0.12, 0.5 - self.score * 0.0004)

    def random_block(self) -> Block:
        """Return a new random piece; special shapes appear from 1000 points on."""
        choices = all_blocks() if self.score >= 1000 else basic_blocks()
        return self._rng.choice(choices)

    def update(self, action: Action = Action.NONE) -> None:
        """Apply one frame's input, then lock the piece if it has landed."""
        if self.game_over and action is Action.RESTART:
            self.game_over = False
            self.reset()

        handlers = {
            Action.LEFT: self.move_left,
            Action.RIGHT: self.move_right,
            Action.DOWN: self.move_down,
            Action.ROTATE: self.rotate_block,
        }
        handler = handlers.get(action)
        if handler is not None:
            handler()

        if self.current_block.is_at_final_position(self.grid):
            self.lock_block()

    def move_left(self) -> None:
        """Shift the piece one column left if it fits."""
        self._shift(0, -1)

    def move_right(self) -> None:
        """Shift the piece one column right if it fits."""
        self._shift(0, 1)

    def _shift(self, rows: int, cols: int) -> None:
        if self.game_over:
            return
        self.current_block.move(rows, cols)
        if self.is_block_out() or not self.block_fits():
            self.current_block.move(-rows, -cols)
        else:
            self._fix_block_position()

    def move_down(self) -> None:
        """Drop the piece one row; lock it if it cannot go further."""
        if self.game_over:
            return
        self.current_block.move(1, 0)
        if self.is_block_out() or not self.block_fits():
            self.current_block.move(-1, 0)
            self.lock_block()
        else:
            self._fix_block_position()

    def rotate_block(self) -> None:
        """Rotate the piece, undoing the rotation if it does not fit."""
        if self.game_over:
            return
        self.current_block.rotate()
        if self.is_block_out() or not self.block_fits():
            self.current_block.undo_rotate()
        else:
            self._fix_block_position()
            self._play_sound(SOUND_ROTATE)

    def is_block_out(self) -> bool:
        """Return True when any cell of the piece lies outside the board."""
        return any(self.grid.check_collision(p.row, p.col) for p in self.current_block.cells())

    def block_fits(self) -> bool:
        """Return True when every cell of the piece is on the board and empty."""
        return all(
            not self.grid.check_collision(p.row, p.col) and self.grid.is_empty(p.row, p.col)
            for p in self.current_block.cells()
        )

    def _fix_block_position(self) -> None:
        min_col = min((p.col for p in self.current_block.cells()), default=0)
        if min_col < 0:
            self.current_block.move(0, -min_col)

    def lock_block(self) -> None:
        """Write the piece into the board and bring in the next one."""
        for p in self.current_block.cells():
            self.grid.cells[p.row][p.col] = self.current_block.id
        self.current_block = copy.copy(self.next_block)

        if self.current_block.is_at_final_position(self.grid) or not self.block_fits():
            if not self.game_over:
                self.game_over = True
                self._play_sound(SOUND_GAME_OVER)
        else:
            self.next_block = self.random_block()
            rows_cleared = self.grid.clear_full_rows()
            if rows_cleared > 0:
                self._play_sound(SOUND_CLEAR)
            self.update_score(rows_cleared, 1)

    def update_score(self, cleared_rows: int, move_down: int) -> None:
        """Add points for cleared rows and for the rows the piece moved down."""
        self.score += _LINE_SCORES.get(cleared_rows, 0)
        if move_down > 0:
            self.score += move_down * 10

    def cleared_lines(self) -> int:
        """Clear any full rows now and return how many were cleared."""
        return self.grid.clear_full_rows()

    def reset(self) -> None:
        """Start over with an empty board and a zero score."""
        self.grid.initialize()
        self.score = 0
        self.current_block = self.random_block()
        self.next_block = self.random_block()
        self.game_over = False
        self.score_saved = False

    def draw(self, surface: pygame.Surface) -> None:
        """Render the board, the falling piece and its landing preview."""
        self.grid.draw(surface)
        self.current_block.draw(surface, 0, 0)
        self.current_block.draw_landing_preview(surface, self.grid)