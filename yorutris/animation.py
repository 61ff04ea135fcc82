"""Animated GIF playback: a looping background and a timed splash screen."""

from __future__ import annotations

from pathlib import Path

import pygame
from PIL import Image, ImageSequence


def load_gif_frames(path: str | Path) -> list[pygame.Surface]:
    """Decode every frame of an animated image into RGBA surfaces."""
    frames = []
    with Image.open(path) as image:
        for frame in ImageSequence.Iterator(image):
            rgba = frame.convert("RGBA")
            surface = pygame.image.frombuffer(rgba.tobytes(), rgba.size, "RGBA")
            frames.append(surface.copy())
    return frames


def _try_load(path: str | Path) -> list[pygame.Surface]:
    try:
        return load_gif_frames(path)
    except OSError:
        return []


def _scaled(surface: pygame.Surface, scale: float) -> pygame.Surface:
    if scale == 1.0:
        return surface
    width = max(1, round(surface.get_width() * scale))
    height = max(1, round(surface.get_height() * scale))
    return pygame.transform.scale(surface, (width, height))


def _duration(fps: float) -> float:
    if fps <= 0:
        raise ValueError(f"frames per second must be positive, got {fps}")
    return 1.0 / fps


class Animation:
    """A frame-stepped animation that advances at most one frame per update."""

    def __init__(
        self, image_path: str | Path, frames: int = 0, frames_per_second: float = 10.0
    ) -> None:
        self._frames = _try_load(image_path)
        self._frame_count = frames if frames > 0 else len(self._frames)
        self._current = 0
        self.frame_duration = _duration(frames_per_second)
        self._accumulator = 0.0
        self.looping = True
        self.scale = 1.0

    @property
    def current_frame(self) -> int:
        return self._current

    @property
    def frame_count(self) -> int:
        return self._frame_count

    @property
    def is_valid(self) -> bool:
        """True when the image file was loaded."""
        return bool(self._frames)

    def update(self, delta_time: float) -> None:
        """Advance the clock and step to the next frame once it is due."""
        self._accumulator += delta_time
        if self._accumulator >= self.frame_duration:
            self._current += 1
            if self._current >= self._frame_count:
                self._current = 0 if self.looping else self._frame_count - 1
            self._accumulator -= self.frame_duration

    def set_frames_per_second(self, fps: float) -> None:
        """Change the playback rate; non-positive rates are ignored."""
        if fps > 0:
            self.frame_duration = 1.0 / fps

    def reset(self) -> None:
        """Go back to the first frame."""
        self._current = 0
        self._accumulator = 0.0

    def current_surface(self) -> pygame.Surface | None:
        """Return the image of the current frame, or None if nothing was loaded."""
        if not self._frames:
            return None
        return self._frames[min(max(self._current, 0), len(self._frames) - 1)]

    def draw(self, surface: pygame.Surface, pos_x: float, pos_y: float) -> None:
        """Draw the current frame at the given position, at ``scale``."""
        frame = self.current_surface()
        if frame is not None:
            surface.blit(_scaled(frame, self.scale), (pos_x, pos_y))

    def draw_fitted(self, surface: pygame.Surface) -> None:
        """Draw the current frame scaled to fit the target, centred vertically."""
        frame = self.current_surface()
        if frame is None or self._frame_count <= 0:
            return
        screen_w, screen_h = surface.get_size()
        frame_w = frame.get_width() / self._frame_count
        frame_h = float(frame.get_height())
        new_scale = min(screen_w / frame_w, screen_h / frame_h)
        pos_x = (screen_w - frame_w * new_scale) * 0.0
        pos_y = (screen_h - frame_h * new_scale) * 0.5
        surface.blit(_scaled(frame, new_scale), (pos_x, pos_y))


class SplashScreen:
    """An animation played once, shown for a fixed time.

    ``frames`` is accepted for call compatibility; the frame count is taken
    from the image itself.
    """

    def __init__(
        self,
        gif_path: str | Path,
        frames: int = 0,
        display_time: float = 3.0,
        frames_per_second: float = 10.0,
    ) -> None:
        self._frames = _try_load(gif_path)
        self._frame_count = len(self._frames)
        self._current = 0
        self._accumulator = 0.0
        self.frame_duration = _duration(frames_per_second)
        self.is_complete = False
        self.animation_complete = False
        self.duration = display_time
        self.timer = 0.0
        self.scale = 1.0
        self._blank = False

    @property
    def current_frame(self) -> int:
        return self._current

    def update(self, delta_time: float) -> bool:
        """Advance the splash; return True once its display time is over."""
        self.timer += delta_time
        if not self.animation_complete:
            self._accumulator += delta_time
            if self._accumulator >= self.frame_duration:
                self._current += 1
                if self._current >= self._frame_count:
                    self._current = max(self._frame_count - 1, 0)
                    self.animation_complete = True
                self._accumulator -= self.frame_duration
        if self.timer >= self.duration:
            self.is_complete = True
        return self.is_complete

    def set_frames_per_second(self, fps: float) -> None:
        """Change the playback rate; non-positive rates are ignored."""
        if fps > 0:
            self.frame_duration = 1.0 / fps

    def reset(self) -> None:
        """Close the splash and blank its image."""
        self.is_complete = True
        self._blank = True
        self.timer = 0.0
        self._current = 0
        self.animation_complete = True

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current frame centred on the target."""
        if self._blank or not self._frames:
            return
        frame = self._frames[min(self._current, len(self._frames) - 1)]
        pos_x = (surface.get_width() - frame.get_width() * self.scale) / 2
        pos_y = (surface.get_height() - frame.get_height() * self.scale) / 2
        surface.blit(_scaled(frame, self.scale), (pos_x, pos_y))