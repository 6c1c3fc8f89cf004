"""Color harmony derivation.

Rotates the base hue on the HSL wheel while holding saturation and lightness,
except for the monochromatic family which keeps hue/saturation and spreads
lightness. All results are canonical ``#RRGGBB`` strings; the base color is
always the first entry of multi-color harmonies.
"""

from __future__ import annotations

from typing import List, Sequence

from .color import Color, ColorLike, parse_color

__all__ = [
    "rotate_hue",
    "complementary_color",
    "analogous_colors",
    "triadic_colors",
    "split_complementary_colors",
    "tetradic_colors",
    "monochromatic_colors",
]

_MONO_LIGHTEST = 0.90
_MONO_DARKEST = 0.15


def rotate_hue(color: ColorLike, degrees: float) -> str:
    h, s, l = parse_color(color).to_hsl()
    return Color.from_hsl(h + degrees, s, l).hex


def _rotations(color: ColorLike, angles: Sequence[float]) -> List[str]:
    base = parse_color(color)
    h, s, l = base.to_hsl()
    return [base.hex if angle == 0 else Color.from_hsl(h + angle, s, l).hex for angle in angles]


def complementary_color(color: ColorLike) -> str:
    return rotate_hue(color, 180)


def analogous_colors(color: ColorLike, count: int = 3, angle: float = 30) -> List[str]:
    """Return ``count`` hues spaced ``angle`` degrees apart, centered on the base.

    With an even count the extra neighbour falls on the positive side.
    """
    if count < 1:
        raise ValueError("count must be >= 1")
    if not 0 < angle <= 180:
        raise ValueError("angle must be in (0, 180]")
    offsets = [(i - (count - 1) // 2) * angle for i in range(count)]
    # Base first, then neighbours in wheel order
    ordered = [0.0] + [o for o in offsets if o != 0]
    return _rotations(color, ordered)


def triadic_colors(color: ColorLike) -> List[str]:
    return _rotations(color, (0, 120, 240))


def split_complementary_colors(color: ColorLike) -> List[str]:
    return _rotations(color, (0, 150, 210))


def tetradic_colors(color: ColorLike) -> List[str]:
    return _rotations(color, (0, 90, 180, 270))


def monochromatic_colors(color: ColorLike, count: int = 5) -> List[str]:
    """Same hue and saturation, lightness spread from light to dark."""
    if count < 1:
        raise ValueError("count must be >= 1")
    base = parse_color(color)
    h, s, _ = base.to_hsl()
    if count == 1:
        return [base.hex]
    step = (_MONO_LIGHTEST - _MONO_DARKEST) / (count - 1)
    return [Color.from_hsl(h, s, _MONO_LIGHTEST - i * step).hex for i in range(count)]
