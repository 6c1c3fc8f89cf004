"""Whole-scale adjustments (brightness, saturation, temperature, contrast, gamma).

Applies the same tweak set to every shade of a scale so a generated palette
can be tuned without regenerating it. Steps run in a fixed order per shade:

1. brightness  : Lab L* shifted by 18 per unit (negative darkens)
2. saturation  : HSL saturation shifted by value/100, clamped to [0, 1]
3. temperature : hue shifted by value * 0.1 degrees (positive = warmer)
4. contrast    : numeric shades other than 500 brighten (lighter shades) or
                 darken (darker shades) by |shade - 500| / 100 * value * 0.02
5. gamma       : each channel becomes round((c / 255) ** gamma * 255)

An all-default ``ScaleAdjustment`` leaves colors untouched apart from
canonicalisation. ``scale_differences`` reports the per-shade CIE76 delta-E
between two scales so callers can preview how far each shade moved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping

from .color import Color, ColorLike, delta_e, lab_to_srgb, parse_color, srgb_to_lab
from .palette import ShadeScale, sort_shade_keys
from .settings import BASE_SHADE

__all__ = ["ScaleAdjustment", "adjust_color", "adjust_scale", "scale_differences"]

_LAB_KN = 18.0
_CONTRAST_STEP = 0.02
_TEMPERATURE_STEP = 0.1


@dataclass(frozen=True)
class ScaleAdjustment:
    brightness: float = 0.0
    saturation: float = 0.0  # -100..100
    temperature: float = 0.0  # -100 cooler .. 100 warmer
    contrast: float = 0.0
    gamma: float = 1.0

    def __post_init__(self) -> None:
        if self.gamma <= 0:
            raise ValueError(f"gamma must be positive, got {self.gamma}")

    @property
    def is_identity(self) -> bool:
        return self == ScaleAdjustment()


def _brighten(color: Color, amount: float) -> Color:
    lightness, a, b = srgb_to_lab(color)
    return lab_to_srgb(lightness + _LAB_KN * amount, a, b)


def _contrast_amount(shade: str, contrast: float) -> float:
    if not shade.isdecimal() or shade == BASE_SHADE:
        return 0.0
    shade_num = int(shade)
    direction = 1 if shade_num < int(BASE_SHADE) else -1
    distance = abs(shade_num - int(BASE_SHADE)) / 100
    return direction * distance * contrast * _CONTRAST_STEP


def adjust_color(color: ColorLike, adjustment: ScaleAdjustment, shade: str = BASE_SHADE) -> Color:
    c = parse_color(color)
    if adjustment.brightness:
        c = _brighten(c, adjustment.brightness)
    if adjustment.saturation:
        h, s, l = c.to_hsl()
        c = Color.from_hsl(h, s + adjustment.saturation * 0.01, l)
    if adjustment.temperature:
        h, s, l = c.to_hsl()
        c = Color.from_hsl((h + adjustment.temperature * _TEMPERATURE_STEP + 360) % 360, s, l)
    if adjustment.contrast:
        amount = _contrast_amount(shade, adjustment.contrast)
        if amount:
            c = _brighten(c, amount)
    if adjustment.gamma != 1:
        g = adjustment.gamma
        c = Color(*(int((ch / 255) ** g * 255 + 0.5) for ch in c.rgb))
    return c


def adjust_scale(scale: Mapping[str, ColorLike], adjustment: ScaleAdjustment) -> ShadeScale:
    """Return a new scale with ``adjustment`` applied to every shade.

    Raises
    ------
    InvalidColorFormat
        If any shade holds an unparsable color.
    """
    return {key: adjust_color(scale[key], adjustment, key).hex for key in sort_shade_keys(scale.keys())}


def scale_differences(original: Mapping[str, ColorLike], adjusted: Mapping[str, ColorLike]) -> Dict[str, float]:
    """Per-shade delta-E for shades present in both scales."""
    diffs: Dict[str, float] = {}
    for key in sort_shade_keys(original.keys()):
        if key not in adjusted:
            continue
        diffs[key] = delta_e(srgb_to_lab(original[key]), srgb_to_lab(adjusted[key]))
    return diffs
