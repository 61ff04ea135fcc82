"""Persistent table of the best scores."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from .colors import WHITE

MAX_ENTRIES = 10
DEFAULT_PATH = "scores.txt"


@dataclass(frozen=True)
class ScoreEntry:
    """One finished game."""

    player_name: str
    score: int
    level: int


class LeaderBoard:
    """The best scores, highest first, kept in a plain text file.

    Each line of the file holds ``name score level`` separated by spaces.
    """

    def __init__(self, path: str | Path = DEFAULT_PATH, max_entries: int = MAX_ENTRIES) -> None:
        self.path = Path(path)
        self.max_entries = max_entries
        self._entries: list[ScoreEntry] = []
        self.load()

    def __enter__(self) -> LeaderBoard:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save()

    def add_score(self, player_name: str, score: int, level: int) -> None:
        """Insert a score unless an identical one is present, then save."""
        entry = ScoreEntry(player_name, score, level)
        if entry in self._entries:
            return
        self._entries.append(entry)
        self._entries.sort(key=lambda e: e.score, reverse=True)
        del self._entries[self.max_entries :]
        self.save()

    def load(self) -> None:
        """Merge in the scores stored in the file, if it exists."""
        try:
            tokens = self.path.read_text().split()
        except FileNotFoundError:
            return
        for start in range(0, len(tokens) - 2, 3):
            name, score, level = tokens[start : start + 3]
            try:
                parsed = int(score), int(level)
            except ValueError:
                break
            self.add_score(name, *parsed)

    def save(self) -> None:
        """Write all scores to the file; an unwritable file is left alone."""
        text = "".join(f"{e.player_name} {e.score} {e.level}\n" for e in self._entries)
        try:
            self.path.write_text(text)
        except OSError:
            return

    def high_scores(self) -> list[ScoreEntry]:
        """Return the scores, highest first."""
        return list(self._entries)

    def clear(self) -> None:
        """Forget every score and empty the file."""
        self._entries.clear()
        try:
            self.path.write_text("")
        except OSError:
            return

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Render the framed table of the top five scores."""
        cx = surface.get_width() // 2
        cy = surface.get_height() // 2
        pygame.draw.rect(surface, WHITE, pygame.Rect(cx - 400, cy - 400, 800, 700), 5)

        def centred(text: str, y: int) -> None:
            rendered = font.render(text, True, WHITE)
            surface.blit(rendered, (cx - rendered.get_width() // 2, y))

        centred("Leaderboard", cy - 360)
        pygame.draw.line(surface, WHITE, (cx - 300, cy - 260), (cx + 300, cy - 260))
        centred("Top 5 Scores:", cy - 200)
        for i, entry in enumerate(self._entries[:5]):
            centred(f"{entry.player_name}: {entry.score}", cy - 100 + i * 80)