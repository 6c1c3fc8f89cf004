"""Contrast utilities for validating color accessibility.

Implements WCAG 2.1 relative luminance and contrast ratio calculations.

Public API:
- relative_luminance(color) -> float
- contrast_ratio(a, b) -> float
- ContrastLevel (AA_LARGE / AA / AAA thresholds)
- passes(ratio, level) -> bool, plus passes_aa / passes_aa_large / passes_aaa
- wcag_compliance(ratio) -> dict[str, bool]
- accessible_text_color(background) -> str
- validate_contrast(pairs, threshold=4.5) -> list[str]

The `pairs` parameter of ``validate_contrast`` uses tuples of
(foreground, background, label) where both colors are hex strings or Color
values.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, List, Tuple

from . import settings
from .color import ColorLike, InvalidColorFormat, parse_color

__all__ = [
    "ContrastLevel",
    "relative_luminance",
    "contrast_ratio",
    "passes",
    "passes_aa",
    "passes_aa_large",
    "passes_aaa",
    "wcag_compliance",
    "accessible_text_color",
    "validate_contrast",
]

WHITE = "#FFFFFF"
BLACK = "#000000"


class ContrastLevel(Enum):
    """Minimum contrast ratios for WCAG compliance levels."""

    AA_LARGE = settings.AA_LARGE_RATIO
    AA = settings.AA_RATIO
    AAA = settings.AAA_RATIO

    @property
    def threshold(self) -> float:
        return float(self.value)

    @property
    def label(self) -> str:
        return "AALarge" if self is ContrastLevel.AA_LARGE else self.name


def _linear_channel(c: float) -> float:
    c = c / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    c = parse_color(color)
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * _linear_channel(c.r) + 0.7152 * _linear_channel(c.g) + 0.0722 * _linear_channel(c.b)


def contrast_ratio(a: ColorLike, b: ColorLike) -> float:
    l1 = relative_luminance(a)
    l2 = relative_luminance(b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def passes(ratio: float, level: ContrastLevel) -> bool:
    return ratio >= level.threshold


def passes_aa(ratio: float) -> bool:
    return passes(ratio, ContrastLevel.AA)


def passes_aa_large(ratio: float) -> bool:
    return passes(ratio, ContrastLevel.AA_LARGE)


def passes_aaa(ratio: float) -> bool:
    return passes(ratio, ContrastLevel.AAA)


def wcag_compliance(ratio: float) -> Dict[str, bool]:
    """Return pass/fail for every level, keyed by display label."""
    return {level.label: passes(ratio, level) for level in ContrastLevel}


def accessible_text_color(background: ColorLike) -> str:
    """Pick white or black text, whichever contrasts more with ``background``.

    White wins ties.
    """
    white_c = contrast_ratio(WHITE, background)
    black_c = contrast_ratio(BLACK, background)
    return WHITE if white_c >= black_c else BLACK


def validate_contrast(
    pairs: Iterable[Tuple[ColorLike, ColorLike, str]], threshold: float = settings.AA_RATIO
) -> List[str]:
    """Validate a collection of foreground/background pairs.

    Parameters
    ----------
    pairs : Iterable[Tuple[ColorLike, ColorLike, str]]
        Each tuple is (foreground, background, label)
    threshold : float
        Minimum acceptable contrast ratio.

    Returns
    -------
    list[str]
        A list of failure messages (empty if all pass).
    """
    failures: List[str] = []
    for fg, bg, label in pairs:
        try:
            ratio = contrast_ratio(fg, bg)
        except InvalidColorFormat as exc:
            failures.append(f"[resolve-error] {label}: {exc}")
            continue
        if ratio < threshold:
            failures.append(
                f"[contrast-fail] {label}: ratio={ratio:.2f} < {threshold} (fg={fg} bg={bg})"
            )
    return failures
