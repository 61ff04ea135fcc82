"""The game window: splash, menu, play field, game-over and leaderboard screens."""

from __future__ import annotations

import argparse
import time
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

import pygame

from .animation import Animation, SplashScreen
from .colors import (
    BLACK,
    DARK_GRAY,
    LIGHTGRAY,
    RAYWHITE,
    WHITE,
    Color,
    fade,
)
from .game import SOUND_CLEAR, SOUND_GAME_OVER, SOUND_ROTATE, Action, Game
from .leaderboard import LeaderBoard

FONT_PATH = Path("Font/monogram.ttf")
BACKGROUND_PATH = Path("Media/5.gif")
SPLASH_PATH = Path("resources/YoRu_n.gif")
MUSIC_PATH = Path("Sounds/music.mp3")
SOUND_PATHS = {
    SOUND_ROTATE: Path("Sounds/rotate.wav"),
    SOUND_CLEAR: Path("Sounds/clear.wav"),
    SOUND_GAME_OVER: Path("Sounds/GameOver.wav"),
}

TARGET_FPS = 60
MENU_LABELS = ("Leaderboard", "Themes", "Settings", "Exit")

_KEY_ACTIONS = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_DOWN: Action.DOWN,
    pygame.K_UP: Action.ROTATE,
    pygame.K_RETURN: Action.RESTART,
    pygame.K_KP_ENTER: Action.RESTART,
}


@dataclass
class Trigger:
    """Fires at most once per ``interval`` seconds of a monotonic clock."""

    interval: float
    last_time: float = 0.0

    def ready(self, now: float) -> bool:
        """Return True, and restart the wait, once ``interval`` has passed."""
        if now - self.last_time >= self.interval:
            self.last_time = now
            return True
        return False


class Screen(Enum):
    """What the window is showing."""

    SPLASH = auto()
    WELCOME = auto()
    LEADERBOARD = auto()
    PLAYING = auto()
    GAME_OVER = auto()


def next_screen(
    current: Screen,
    splash_done: bool,
    enter_pressed: bool,
    started: bool,
    game_over: bool,
    leaderboard_clicked: bool,
) -> Screen:
    """Return the screen to show given the previous one and this frame's state."""
    if not splash_done:
        return Screen.SPLASH
    if (started or enter_pressed) and not game_over:
        return Screen.PLAYING
    if game_over:
        return Screen.GAME_OVER
    if current is Screen.LEADERBOARD:
        return Screen.WELCOME if enter_pressed else Screen.LEADERBOARD
    if current is Screen.WELCOME and leaderboard_clicked:
        return Screen.LEADERBOARD
    return Screen.WELCOME


def _fill(surface: pygame.Surface, rect: pygame.Rect, color: Color) -> None:
    if rect.width <= 0 or rect.height <= 0:
        return
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    layer.fill(color)
    surface.blit(layer, rect.topleft)


def _outline(surface: pygame.Surface, rect: pygame.Rect, color: Color, width: int) -> None:
    if rect.width <= 0 or rect.height <= 0:
        return
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    pygame.draw.rect(layer, color, layer.get_rect(), width)
    surface.blit(layer, rect.topleft)


def _panel(surface: pygame.Surface, rect: pygame.Rect, fill: Color) -> None:
    _fill(surface, rect, fill)
    _outline(surface, rect.inflate(4, 4), fade(RAYWHITE, 0.6), 3)


def _text(
    surface: pygame.Surface, font: pygame.font.Font, text: str, pos: tuple[float, float], color: Color
) -> None:
    surface.blit(font.render(text, True, color), pos)


def _text_centered_in(
    surface: pygame.Surface, font: pygame.font.Font, text: str, rect: pygame.Rect, color: Color
) -> None:
    width, height = font.size(text)
    _text(
        surface,
        font,
        text,
        (rect.x + (rect.width - width) / 2, rect.y + (rect.height - height) / 2),
        color,
    )


def _text_centered_x(
    surface: pygame.Surface, font: pygame.font.Font, text: str, y: float, color: Color
) -> None:
    width, _ = font.size(text)
    _text(surface, font, text, (surface.get_width() / 2 - width / 2, y), color)


def _menu_buttons(width: int, height: int) -> list[tuple[str, pygame.Rect]]:
    start_y = height / 2 - 300
    return [
        (label, pygame.Rect(width // 2 - 200, int(start_y + 200 + 100 * i), 400, 64))
        for i, label in enumerate(MENU_LABELS)
    ]


def _load_font(size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(FONT_PATH), size)
    except (OSError, FileNotFoundError, pygame.error):
        return pygame.font.Font(None, size)


class _Audio:
    """Sound effects and background music; silent when no audio device exists."""

    def __init__(self) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._music = False
        self._music_playing = False
        try:
            pygame.mixer.init()
        except pygame.error:
            return
        for name, path in SOUND_PATHS.items():
            try:
                self._sounds[name] = pygame.mixer.Sound(str(path))
            except (pygame.error, FileNotFoundError):
                continue
        try:
            pygame.mixer.music.load(str(MUSIC_PATH))
            pygame.mixer.music.play(-1)
            pygame.mixer.music.pause()
            self._music = True
        except pygame.error:
            self._music = False

    def play(self, name: str) -> None:
        sound = self._sounds.get(name)
        if sound is not None:
            sound.play()

    def music(self, on: bool) -> None:
        if not self._music or on == self._music_playing:
            return
        if on:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.pause()
        self._music_playing = on

    def close(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
            pygame.mixer.quit()


def _draw_background(
    surface: pygame.Surface, background: Animation, alpha: float, fallback: bool = False
) -> None:
    if fallback and not background.is_valid:
        surface.fill(BLACK)
        return
    background.draw_fitted(surface)
    _fill(surface, surface.get_rect(), fade(BLACK, alpha))


def _draw_playing(
    surface: pygame.Surface, font: pygame.font.Font, game: Game, background: Animation
) -> None:
    _draw_background(surface, background, 0.5, fallback=True)

    grid_width, _ = game.grid.pixel_size()
    score_label = "Score: "
    label_w, label_h = font.size(score_label)
    x_pos = (surface.get_width() + grid_width) // 2 - label_w / 2 - 100.0
    y_pos = 200.0

    _text(surface, font, score_label, (x_pos, y_pos), WHITE)
    _text(surface, font, "Next: ", (x_pos, y_pos + label_h + 50.0), WHITE)

    box_fill = fade(RAYWHITE, 0.6)
    score_rect = pygame.Rect(int(x_pos + label_w + 10.0), int(y_pos), 400, label_h)
    _panel(surface, score_rect, box_fill)

    next_rect = pygame.Rect(
        score_rect.x, score_rect.y + score_rect.height + 30, score_rect.width, score_rect.height + 50
    )
    _panel(surface, next_rect, box_fill)
    game.next_block.draw(surface, 1100, 235)

    _text_centered_in(surface, font, str(game.score), score_rect, DARK_GRAY)

    lines_rect = pygame.Rect(
        score_rect.x, next_rect.y + next_rect.height + 30, score_rect.width, score_rect.height
    )
    _panel(surface, lines_rect, box_fill)
    _text(surface, font, "Lines: ", (x_pos, lines_rect.y), WHITE)
    _text_centered_in(surface, font, str(game.grid.row_cleared), lines_rect, DARK_GRAY)

    level_rect = pygame.Rect(
        score_rect.x, lines_rect.y + lines_rect.height + 30, score_rect.width, score_rect.height
    )
    _panel(surface, level_rect, box_fill)
    _text(surface, font, "Level:", (x_pos, level_rect.y), WHITE)
    _text_centered_in(surface, font, str(game.level()), level_rect, DARK_GRAY)

    game.draw(surface)


def _draw_game_over(
    surface: pygame.Surface,
    fonts: dict[int, pygame.font.Font],
    game: Game,
    background: Animation,
) -> None:
    _draw_background(surface, background, 0.7)
    half_h = surface.get_height() // 2
    big, normal, small = fonts[100], fonts[64], fonts[40]

    title_w, _ = big.size("Game Over!")
    _text(surface, big, "Game Over!", ((surface.get_width() - title_w) / 2, half_h - 100), WHITE)

    final = f"Your Score: {game.score}"
    final_w, _ = normal.size(final)
    _text(surface, normal, final, ((surface.get_width() - final_w) / 2, half_h + 50), WHITE)

    _text_centered_x(surface, small, "Press Enter to restart", half_h + 150, WHITE)


def _draw_welcome(
    surface: pygame.Surface,
    fonts: dict[int, pygame.font.Font],
    background: Animation,
    mouse: tuple[int, int],
) -> None:
    _draw_background(surface, background, 0.6)
    start_y = surface.get_height() / 2 - 300
    _text_centered_x(surface, fonts[100], "Welcome to YoRutris!", start_y, WHITE)
    _text_centered_x(surface, fonts[40], "Press ENTER to start", start_y + 120, LIGHTGRAY)

    for label, rect in _menu_buttons(surface.get_width(), surface.get_height()):
        hovered = rect.collidepoint(mouse)
        _panel(surface, rect, fade(LIGHTGRAY if hovered else RAYWHITE, 0.6))
        _text_centered_in(surface, fonts[64], label, rect, DARK_GRAY)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="yorutris", description="A falling-blocks puzzle game.")
    parser.parse_args(argv)

    pygame.init()
    info = pygame.display.Info()
    surface = pygame.display.set_mode(
        (info.current_w, info.current_h), pygame.FULLSCREEN | pygame.RESIZABLE, vsync=1
    )
    pygame.display.set_caption("YoRu Screen")
    clock = pygame.time.Clock()
    fonts = {size: _load_font(size) for size in (40, 64, 100)}

    background = Animation(BACKGROUND_PATH, 35, 10.0)
    background.looping = True
    leaderboard = LeaderBoard()
    audio = _Audio()
    game = Game(play_sound=audio.play)
    splash = SplashScreen(SPLASH_PATH, 10, 6.0, 10.0)

    trigger = Trigger(interval=game.speed())
    started_at = time.monotonic()
    pending: deque[Action] = deque()
    screen = Screen.SPLASH
    started = False
    running = True

    try:
        while running:
            delta_time = clock.tick(TARGET_FPS) / 1000.0
            enter_pressed = False
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        enter_pressed = True
                    pending.append(_KEY_ACTIONS.get(event.key, Action.NONE))
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
            if not running:
                break

            action = pending.popleft() if pending else Action.NONE
            background.update(delta_time)
            if splash.update(delta_time):
                splash.reset()
            game.update(action)

            trigger.interval = game.speed()
            if started and not game.game_over and trigger.ready(time.monotonic() - started_at):
                game.move_down()

            mouse = pygame.mouse.get_pos()
            leaderboard_rect = _menu_buttons(surface.get_width(), surface.get_height())[0][1]
            leaderboard_clicked = clicked and leaderboard_rect.collidepoint(mouse)
            screen = next_screen(
                screen,
                splash.is_complete,
                enter_pressed,
                started,
                game.game_over,
                bool(leaderboard_clicked),
            )
            if splash.is_complete and enter_pressed:
                started = True

            surface.fill(BLACK)
            audio.music(screen is Screen.PLAYING)
            if screen is Screen.SPLASH:
                splash.draw(surface)
            elif screen is Screen.PLAYING:
                _draw_playing(surface, fonts[64], game, background)
            elif screen is Screen.GAME_OVER:
                if not game.score_saved:
                    leaderboard.add_score("Player", game.score, game.level())
                    game.score_saved = True
                _draw_game_over(surface, fonts, game, background)
            elif screen is Screen.LEADERBOARD:
                _draw_background(surface, background, 0.7)
                leaderboard.load()
                leaderboard.draw(surface, fonts[64])
            else:
                _draw_welcome(surface, fonts, background, mouse)
            pygame.display.flip()
    finally:
        leaderboard.save()
        audio.close()
        pygame.quit()
    return 0