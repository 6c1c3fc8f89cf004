"""Accessibility analysis for a shade scale.

For every shade (numeric order) computes contrast against white and black
text, the better of the two and the WCAG flags for it. Adjacent shades are
checked for a minimal visible step (contrast >= 1.1 between neighbours).

Scale-level warnings:
 - ``contrast``: shades whose best text color still fails AA for normal text
 - ``variety``: fewer than three shades usable as AA text backgrounds

API:
    report = analyze_scale(generate_palette("#3182CE"))
    if not report.ok:
        print(report.summary())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Tuple

from .color import ColorLike, normalize_hex
from .contrast import BLACK, WHITE, contrast_ratio
from .palette import sort_shade_keys
from .settings import (
    AA_LARGE_RATIO,
    AA_RATIO,
    AAA_RATIO,
    MIN_ACCESSIBLE_SHADES,
    MIN_ADJACENT_CONTRAST,
)

__all__ = [
    "ShadeContrast",
    "AdjacentContrast",
    "ScaleWarning",
    "ScaleAccessibilityReport",
    "analyze_scale",
]


@dataclass(frozen=True)
class ShadeContrast:
    shade: str
    color: str
    white_contrast: float
    black_contrast: float
    best_text_color: str
    best_contrast: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool


@dataclass(frozen=True)
class AdjacentContrast:
    shade1: str
    shade2: str
    contrast: float
    adequate: bool


@dataclass(frozen=True)
class ScaleWarning:
    kind: str  # "contrast" | "variety"
    message: str
    shades: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ScaleAccessibilityReport:
    shades: List[ShadeContrast] = field(default_factory=list)
    adjacent: List[AdjacentContrast] = field(default_factory=list)
    warnings: List[ScaleWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings and all(a.adequate for a in self.adjacent)

    def summary(self) -> str:
        passing = sum(1 for s in self.shades if s.aa_normal)
        weak = [f"{a.shade1}/{a.shade2}" for a in self.adjacent if not a.adequate]
        text = f"{passing}/{len(self.shades)} shades pass AA"
        if weak:
            text += "; indistinct steps: " + ", ".join(weak)
        if self.warnings:
            text += "; " + "; ".join(w.message for w in self.warnings)
        return text


def _shade_contrast(shade: str, color: ColorLike) -> ShadeContrast:
    white_c = contrast_ratio(color, WHITE)
    black_c = contrast_ratio(color, BLACK)
    best = max(white_c, black_c)
    return ShadeContrast(
        shade=shade,
        color=normalize_hex(color),
        white_contrast=white_c,
        black_contrast=black_c,
        best_text_color=WHITE if white_c >= black_c else BLACK,
        best_contrast=best,
        aa_normal=best >= AA_RATIO,
        aa_large=best >= AA_LARGE_RATIO,
        aaa_normal=best >= AAA_RATIO,
        aaa_large=best >= AA_RATIO,
    )


def analyze_scale(scale: Mapping[str, ColorLike]) -> ScaleAccessibilityReport:
    """Analyze ``scale``; raises InvalidColorFormat on unparsable shades."""
    shades = [_shade_contrast(key, scale[key]) for key in sort_shade_keys(scale.keys())]

    adjacent: List[AdjacentContrast] = []
    for first, second in zip(shades, shades[1:]):
        ratio = contrast_ratio(first.color, second.color)
        adjacent.append(
            AdjacentContrast(
                shade1=first.shade,
                shade2=second.shade,
                contrast=ratio,
                adequate=ratio >= MIN_ADJACENT_CONTRAST,
            )
        )

    warnings: List[ScaleWarning] = []
    poor = tuple(s.shade for s in shades if not s.aa_normal)
    if poor:
        warnings.append(
            ScaleWarning(
                kind="contrast",
                message=f"{len(poor)} shades don't meet WCAG AA contrast requirements for normal text",
                shades=poor,
            )
        )
    if len(shades) - len(poor) < MIN_ACCESSIBLE_SHADES:
        warnings.append(
            ScaleWarning(
                kind="variety",
                message="Limited accessible color options for text. Consider adding more contrast variation.",
            )
        )
    return ScaleAccessibilityReport(shades=shades, adjacent=adjacent, warnings=warnings)
