"""Colour palette and small colour helpers used by the renderer."""

from __future__ import annotations

Color = tuple[int, int, int, int]

DARK_BLUE: Color = (72, 12, 168, 255)
DARK_GREEN: Color = (47, 230, 23, 255)
DARK_RED: Color = (232, 18, 18, 255)
DARK_ORANGE: Color = (226, 116, 17, 255)
DARK_YELLOW: Color = (237, 234, 4, 255)
DARK_CYAN: Color = (21, 204, 209, 255)
DARK_PURPLE: Color = (166, 0, 247, 255)
DARK_GRAY: Color = (26, 31, 40, 255)
ROSE: Color = (247, 37, 133, 255)
FANDANGO: Color = (181, 37, 133, 255)
GRAPE: Color = (114, 9, 183, 255)
CHRYSLER_BLUE: Color = (86, 11, 173, 255)
ZAFFRE: Color = (58, 12, 163, 155)
PERSIAN_BLUE: Color = (63, 55, 201, 255)
NEON_BLUE: Color = (67, 97, 238, 255)
SKY_BLUE: Color = (76, 201, 240, 255)

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)
LIGHTGRAY: Color = (200, 200, 200, 255)
RAYWHITE: Color = (245, 245, 245, 255)

_PALETTE: tuple[Color, ...] = (
    DARK_GRAY,
    GRAPE,
    DARK_BLUE,
    DARK_ORANGE,
    DARK_GREEN,
    DARK_YELLOW,
    DARK_CYAN,
    DARK_PURPLE,
    ROSE,
    FANDANGO,
    CHRYSLER_BLUE,
    PERSIAN_BLUE,
    NEON_BLUE,
    DARK_RED,
    SKY_BLUE,
    ZAFFRE,
)


def get_colors() -> list[Color]:
    """Return the cell palette, indexed by block id (index 0 is the empty cell)."""
    return list(_PALETTE)


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def fade(color: Color, alpha: float) -> Color:
    """Return ``color`` with its alpha set to ``alpha`` (clamped to 0..1) of full."""
    alpha = _clamp(alpha, 0.0, 1.0)
    r, g, b, _ = color
    return (r, g, b, int(255.0 * alpha))


def brightness(color: Color, factor: float) -> Color:
    """Darken (negative factor) or lighten (positive factor) a colour; alpha is kept."""
    factor = _clamp(factor, -1.0, 1.0)
    r, g, b, a = color
    if factor < 0.0:
        scale = 1.0 + factor
        channels = (c * scale for c in (r, g, b))
    else:
        channels = ((255 - c) * factor + c for c in (r, g, b))
    nr, ng, nb = (int(c) for c in channels)
    return (nr, ng, nb, a)