"""Shade scale generation from a single seed color.

Given a seed color, produces the ten-step scale used to give a base color
light-to-dark variants (``50`` lightest ... ``900`` darkest). The seed anchors
``500``; lighter steps mix it toward white and darker steps toward black with
fixed per-step amounts:

    50: +0.85  100: +0.70  200: +0.50  300: +0.30  400: +0.10
    500: seed
    600: -0.15  700: -0.30  800: -0.45  900: -0.60

(positive = share of the distance to white; negative = darkening, each
channel scaled by ``1 - amount``). Mixing is channel-wise, so every channel
is non-increasing from ``50`` to ``900`` and relative luminance follows,
whatever the seed hue.

Public API:
- generate_palette(seed) -> dict[str, str]
- SHADE_KEYS, is_shade_key(key), sort_shade_keys(keys)
- validate_scale(scale) -> list[PaletteIssue]

Determinism: for the same seed the function produces identical output.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping

from .color import Color, ColorLike, blend, is_valid_color, parse_color
from .settings import BASE_SHADE, SHADE_KEYS

__all__ = [
    "SHADE_KEYS",
    "ShadeScale",
    "PaletteIssue",
    "generate_palette",
    "is_shade_key",
    "sort_shade_keys",
    "validate_scale",
]

_logger = logging.getLogger(__name__)

ShadeScale = Dict[str, str]

_WHITE = "#FFFFFF"
_LIGHTEN = {"50": 0.85, "100": 0.70, "200": 0.50, "300": 0.30, "400": 0.10}
_DARKEN = {"600": 0.15, "700": 0.30, "800": 0.45, "900": 0.60}


def _darken(color: Color, amount: float) -> Color:
    return Color(*(int(ch * (1 - amount) + 0.5) for ch in color.rgb))


@dataclass(frozen=True)
class PaletteIssue:
    key: str
    kind: str  # "missing_shade" | "unexpected_shade" | "invalid_color"
    message: str


def is_shade_key(key: object) -> bool:
    return isinstance(key, str) and key in SHADE_KEYS


def sort_shade_keys(keys: Iterable[str]) -> List[str]:
    """Order keys numerically; non-numeric keys follow in their given order."""
    numeric: List[str] = []
    other: List[str] = []
    for key in keys:
        (numeric if isinstance(key, str) and key.isdecimal() else other).append(key)
    numeric.sort(key=int)
    return numeric + other


def generate_palette(seed: ColorLike) -> ShadeScale:
    """Generate a ten-step shade scale anchored on ``seed``.

    Raises
    ------
    InvalidColorFormat
        If ``seed`` cannot be parsed.
    """
    base = parse_color(seed)
    scale: ShadeScale = {}
    for key in SHADE_KEYS:
        if key == BASE_SHADE:
            scale[key] = base.hex
        elif key in _LIGHTEN:
            scale[key] = blend(base, _WHITE, _LIGHTEN[key]).hex
        else:
            scale[key] = _darken(base, _DARKEN[key]).hex
    _logger.debug("generated palette seed=%s 50=%s 900=%s", base.hex, scale["50"], scale["900"])
    return scale


def validate_scale(scale: Mapping[str, object]) -> List[PaletteIssue]:
    """Report structural problems in ``scale`` without raising."""
    issues: List[PaletteIssue] = []
    for key in SHADE_KEYS:
        if key not in scale:
            issues.append(PaletteIssue(key=key, kind="missing_shade", message=f"Missing shade {key}"))
    for key in sort_shade_keys(scale.keys()):
        if not is_shade_key(key):
            issues.append(
                PaletteIssue(key=str(key), kind="unexpected_shade", message=f"Unexpected shade key {key!r}")
            )
        if not is_valid_color(scale[key]):
            issues.append(
                PaletteIssue(
                    key=str(key),
                    kind="invalid_color",
                    message=f"Shade {key} has invalid color {scale[key]!r}",
                )
            )
    return issues

