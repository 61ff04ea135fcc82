import pygame
import pytest
from PIL import Image

from yorutris.animation import Animation, SplashScreen, load_gif_frames

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)
BLACK = (0, 0, 0)


@pytest.fixture
def gif_path(tmp_path):
    path = tmp_path / "anim.gif"
    frames = [Image.new("RGB", (4, 2), color) for color in (RED, GREEN, BLUE)]
    frames[0].save(path, save_all=True, append_images=frames[1:], duration=100, loop=0)
    return path


def rgb(surface, pos):
    return tuple(surface.get_at(pos))[:3]


def test_load_gif_frames(gif_path):
    frames = load_gif_frames(gif_path)
    assert len(frames) == 3
    assert frames[0].get_size() == (4, 2)
    assert [rgb(f, (0, 0)) for f in frames] == [RED, GREEN, BLUE]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_gif_frames(tmp_path / "missing.gif")


def test_missing_file_gives_invalid_animation(tmp_path):
    anim = Animation(tmp_path / "missing.gif")
    assert anim.is_valid is False
    assert anim.current_surface() is None


def test_frame_count_from_file_or_override(gif_path):
    assert Animation(gif_path).frame_count == 3
    assert Animation(gif_path, 5).frame_count == 5


def test_one_step_per_update(gif_path):
    anim = Animation(gif_path, 0, 10.0)
    anim.update(0.25)
    assert anim.current_frame == 1
    assert rgb(anim.current_surface(), (0, 0)) == GREEN


def test_looping_wraps(gif_path):
    anim = Animation(gif_path, 0, 10.0)
    for _ in range(3):
        anim.update(0.15)
    assert anim.current_frame == 0


def test_non_looping_holds_last_frame(gif_path):
    anim = Animation(gif_path, 0, 10.0)
    anim.looping = False
    for _ in range(5):
        anim.update(0.15)
    assert anim.current_frame == anim.frame_count - 1


def test_reset_returns_to_first_frame(gif_path):
    anim = Animation(gif_path, 0, 10.0)
    anim.update(0.15)
    anim.reset()
    assert anim.current_frame == 0


def test_set_frames_per_second_ignores_non_positive(gif_path):
    anim = Animation(gif_path, 0, 10.0)
    anim.set_frames_per_second(0)
    anim.update(0.15)
    assert anim.current_frame == 1
    anim.set_frames_per_second(1.0)
    anim.update(0.15)
    assert anim.current_frame == 1


def test_constructor_rejects_non_positive_rate(gif_path):
    with pytest.raises(ValueError):
        Animation(gif_path, 0, 0.0)


def test_draw_with_scale(gif_path):
    anim = Animation(gif_path)
    anim.scale = 2.0
    surface = pygame.Surface((20, 20))
    anim.draw(surface, 5, 5)
    assert rgb(surface, (5, 5)) == RED
    assert rgb(surface, (12, 8)) == RED
    assert rgb(surface, (13, 5)) == BLACK


def test_draw_fitted_fills_height(gif_path):
    anim = Animation(gif_path)
    surface = pygame.Surface((40, 20))
    anim.draw_fitted(surface)
    assert rgb(surface, (0, 0)) == RED
    assert rgb(surface, (39, 19)) == RED


def test_splash_completes_after_display_time(gif_path):
    splash = SplashScreen(gif_path, 3, display_time=0.5, frames_per_second=10.0)
    results = [splash.update(0.2) for _ in range(3)]
    assert results == [False, False, True]
    assert splash.animation_complete is True
    assert splash.current_frame == 2


def test_splash_draws_centred_frame(gif_path):
    splash = SplashScreen(gif_path, 3)
    surface = pygame.Surface((8, 6))
    splash.draw(surface)
    assert rgb(surface, (2, 2)) == RED
    assert rgb(surface, (0, 0)) == BLACK


def test_splash_reset_blanks_and_closes(gif_path):
    splash = SplashScreen(gif_path, 3)
    splash.update(0.15)
    splash.reset()
    assert splash.is_complete is True
    assert splash.current_frame == 0
    surface = pygame.Surface((4, 2))
    splash.draw(surface)
    assert rgb(surface, (0, 0)) == BLACK


def test_splash_rejects_non_positive_rate(gif_path):
    with pytest.raises(ValueError):
        SplashScreen(gif_path, 3, 3.0, -1.0)