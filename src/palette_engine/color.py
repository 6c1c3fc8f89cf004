"""Canonical color value and conversions.

Every public operation in the engine accepts either a hex string or a
:class:`Color`; strings are normalised exactly once here, at the boundary,
and all downstream math works on the immutable value.

Accepted input forms: ``#RGB`` and ``#RRGGBB`` (case-insensitive). Anything
else (missing ``#``, alpha digits, surrounding whitespace, non-strings) raises
:class:`InvalidColorFormat`. The canonical text form is uppercase ``#RRGGBB``.

Public API:
- Color (frozen dataclass: r, g, b)
- parse_color(value) -> Color
- normalize_hex(value) -> str
- is_valid_color(value) -> bool
- blend(a, b, t) -> Color
- srgb_to_lab(color) -> (L, a, b) / lab_to_srgb(L, a, b) -> Color
- delta_e(lab1, lab2) -> float

Design choices:
 - HSL math goes through ``colorsys`` (HLS ordering) and is exposed with hue
   in degrees, saturation/lightness in [0, 1].
 - Lab uses the D65 white point and the CIE76 difference; enough for the
   coarse "how far did this shade move" reporting done by adjustments.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from typing import Tuple, Union

__all__ = [
    "Color",
    "ColorLike",
    "InvalidColorFormat",
    "parse_color",
    "normalize_hex",
    "is_valid_color",
    "blend",
    "srgb_to_lab",
    "lab_to_srgb",
    "delta_e",
]

_HEX_ERR = "Color must be a #RGB or #RRGGBB hex string: {value!r}"
_HEX_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{3})")

Lab = Tuple[float, float, float]


class InvalidColorFormat(ValueError):
    """Raised when a value cannot be interpreted as a color."""


def _clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, v))


def _to_byte(v: float) -> int:
    """Map a unit float to 0-255, rounding half up."""
    return int(_clamp(v) * 255 + 0.5)


@dataclass(frozen=True)
class Color:
    """Immutable 24-bit sRGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 255:
                raise InvalidColorFormat(f"Channel {name} must be an int in 0-255, got {value!r}")

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b

    def __str__(self) -> str:
        return self.hex

    @classmethod
    def from_unit(cls, r: float, g: float, b: float) -> "Color":
        """Build from channels in [0, 1]; out-of-range values are clamped."""
        return cls(_to_byte(r), _to_byte(g), _to_byte(b))

    def to_hsl(self) -> Tuple[float, float, float]:
        """Return (hue degrees, saturation, lightness)."""
        h, l, s = colorsys.rgb_to_hls(self.r / 255.0, self.g / 255.0, self.b / 255.0)
        return h * 360.0, s, l

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float) -> "Color":
        h = (hue % 360.0) / 360.0
        r, g, b = colorsys.hls_to_rgb(h, _clamp(lightness), _clamp(saturation))
        return cls.from_unit(r, g, b)


ColorLike = Union[str, Color]


def parse_color(value: ColorLike) -> Color:
    """Parse ``value`` into a :class:`Color`.

    Raises
    ------
    InvalidColorFormat
        If ``value`` is neither a Color nor a ``#RGB`` / ``#RRGGBB`` string.
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str) or not _HEX_PATTERN.fullmatch(value):
        raise InvalidColorFormat(_HEX_ERR.format(value=value))
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return Color(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def normalize_hex(value: ColorLike) -> str:
    """Return the canonical uppercase ``#RRGGBB`` form of ``value``."""
    return parse_color(value).hex


def is_valid_color(value: object) -> bool:
    try:
        parse_color(value)  # type: ignore[arg-type]
    except InvalidColorFormat:
        return False
    return True


def blend(a: ColorLike, b: ColorLike, t: float) -> Color:
    """Mix ``a`` toward ``b`` by factor ``t`` (0 -> a, 1 -> b) in sRGB."""
    if not 0 <= t <= 1:
        raise ValueError("t must be between 0 and 1")
    ca = parse_color(a)
    cb = parse_color(b)
    return Color(
        int(ca.r + (cb.r - ca.r) * t + 0.5),
        int(ca.g + (cb.g - ca.g) * t + 0.5),
        int(ca.b + (cb.b - ca.b) * t + 0.5),
    )


# --- CIE Lab ---------------------------------------------------------------

_XN, _YN, _ZN = 0.95047, 1.0, 1.08883


def _srgb_channel_to_linear(c: float) -> float:
    c = c / 255.0
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb_channel(c: float) -> float:
    if c <= 0.0031308:
        return 12.92 * c
    return 1.055 * (c ** (1 / 2.4)) - 0.055


def _lab_f(t: float) -> float:
    return t ** (1 / 3) if t > 0.008856 else (7.787 * t) + (16 / 116)


def _lab_f_inv(t: float) -> float:
    cube = t**3
    return cube if cube > 0.008856 else (t - 16 / 116) / 7.787


def srgb_to_lab(color: ColorLike) -> Lab:
    c = parse_color(color)
    r_lin = _srgb_channel_to_linear(c.r)
    g_lin = _srgb_channel_to_linear(c.g)
    b_lin = _srgb_channel_to_linear(c.b)
    # sRGB to XYZ (D65)
    x = r_lin * 0.4124 + g_lin * 0.3576 + b_lin * 0.1805
    y = r_lin * 0.2126 + g_lin * 0.7152 + b_lin * 0.0722
    z = r_lin * 0.0193 + g_lin * 0.1192 + b_lin * 0.9505
    fx = _lab_f(x / _XN)
    fy = _lab_f(y / _YN)
    fz = _lab_f(z / _ZN)
    return (116 * fy) - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_srgb(lightness: float, a: float, b: float) -> Color:
    """Convert Lab back to the nearest in-gamut sRGB color (channels clamped)."""
    fy = (lightness + 16) / 116
    fx = fy + a / 500
    fz = fy - b / 200
    x = _XN * _lab_f_inv(fx)
    y = _YN * _lab_f_inv(fy)
    z = _ZN * _lab_f_inv(fz)
    r_lin = 3.2406 * x - 1.5372 * y - 0.4986 * z
    g_lin = -0.9689 * x + 1.8758 * y + 0.0415 * z
    b_lin = 0.0557 * x - 0.2040 * y + 1.0570 * z
    return Color.from_unit(
        _linear_to_srgb_channel(_clamp(r_lin)),
        _linear_to_srgb_channel(_clamp(g_lin)),
        _linear_to_srgb_channel(_clamp(b_lin)),
    )


def delta_e(lab1: Lab, lab2: Lab) -> float:
    return math.sqrt(sum((p - q) ** 2 for p, q in zip(lab1, lab2)))
