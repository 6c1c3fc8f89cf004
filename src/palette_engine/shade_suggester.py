"""Shade suggestions for light/dark color modes.

Two independent helpers:

 - ``suggest_complementary_shade``: static inverse table pairing a light
   shade with its dark-mode counterpart (50<->900 ... 400<->500).
 - ``find_best_contrast_shade``: scans a candidate text scale and picks the
   shade with the highest WCAG contrast against a background.

Rules for the best-contrast search:
 - Missing/unparsable background or an empty/non-mapping scale never raise;
   the lightest shade ("50") is returned together with a warning.
 - The background is dark when its relative luminance is below 0.45, which
   selects a preferred subset (50/100/200 on dark, 900/800/700 on light).
   The subset is reported but does not influence selection: every candidate
   competes on contrast alone.
 - Strictly higher ratio wins; ties keep the first shade scanned. Candidates
   are scanned in numeric key order (non-numeric keys last) so the result does
   not depend on mapping insertion order.
 - When nothing reaches 4.5:1 the best candidate is still returned, with a
   warning.

Warnings are returned on ``ShadeSelection.warnings`` and logged at WARNING
level on this module's logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional, Tuple, Union

from .color import InvalidColorFormat, parse_color
from .contrast import contrast_ratio, relative_luminance
from .palette import sort_shade_keys
from .settings import (
    DARK_BACKGROUND_LUMINANCE,
    DEFAULT_TEXT_SHADE,
    FALLBACK_DARK_SHADE,
    MIN_TEXT_CONTRAST,
)

__all__ = [
    "ShadeWarning",
    "ShadeSelection",
    "ColorModeSuggestion",
    "suggest_complementary_shade",
    "find_best_contrast_shade",
    "select_best_contrast_shade",
    "suggest_color_mode_shades",
]

_logger = logging.getLogger(__name__)

_COMPLEMENTARY: Dict[str, str] = {
    "50": "900",
    "100": "800",
    "200": "700",
    "300": "600",
    "400": "500",
    "500": "400",
    "600": "300",
    "700": "200",
    "800": "100",
    "900": "50",
}

_PREFERRED_ON_DARK: Tuple[str, ...] = ("50", "100", "200")
_PREFERRED_ON_LIGHT: Tuple[str, ...] = ("900", "800", "700")


@dataclass(frozen=True)
class ShadeWarning:
    kind: str  # "invalid_background" | "invalid_palette" | "invalid_candidate" | "below_minimum"
    message: str


@dataclass(frozen=True)
class ShadeSelection:
    """Outcome of a best-contrast search.

    Attributes
    ----------
    shade : str
        Selected shade key (or the default "50" when inputs were unusable).
    ratio : float
        Contrast of the selected shade against the background; 0.0 when no
        candidate could be evaluated.
    meets_minimum : bool
        Whether ``ratio`` reaches the WCAG AA minimum (4.5).
    background_is_dark : bool | None
        Background classification, None when the background was unusable.
    preferred : tuple[str, ...]
        Preferred shade subset for the background classification.
    warnings : list[ShadeWarning]
        Degraded-path signals for the caller.
    used_default : bool
        True when inputs were unusable and the default shade was returned.
    """

    shade: str
    ratio: float = 0.0
    meets_minimum: bool = False
    background_is_dark: Optional[bool] = None
    preferred: Tuple[str, ...] = ()
    warnings: List[ShadeWarning] = field(default_factory=list)
    used_default: bool = False


@dataclass(frozen=True)
class ColorModeSuggestion:
    bg_shade_light: str
    bg_shade_dark: Optional[str]
    text_shade_light: Optional[str]
    text_shade_dark: Optional[str]


def suggest_complementary_shade(shade: Union[str, int]) -> str:
    """Return the dark-mode counterpart of ``shade`` (fallback "800")."""
    return _COMPLEMENTARY.get(str(shade), FALLBACK_DARK_SHADE)


def _warn(warnings: List[ShadeWarning], kind: str, message: str) -> None:
    _logger.warning("%s", message)
    warnings.append(ShadeWarning(kind=kind, message=message))


def select_best_contrast_shade(
    background: object, candidates: object
) -> ShadeSelection:
    """Choose the candidate shade with the highest contrast against ``background``."""
    warnings: List[ShadeWarning] = []
    try:
        bg = parse_color(background)  # type: ignore[arg-type]
    except InvalidColorFormat as exc:
        _warn(warnings, "invalid_background", f"Invalid background color: {exc}")
        return ShadeSelection(shade=DEFAULT_TEXT_SHADE, warnings=warnings, used_default=True)
    if not isinstance(candidates, Mapping) or not candidates:
        _warn(warnings, "invalid_palette", f"Invalid text palette: {candidates!r}")
        return ShadeSelection(shade=DEFAULT_TEXT_SHADE, warnings=warnings, used_default=True)

    bg_is_dark = relative_luminance(bg) < DARK_BACKGROUND_LUMINANCE
    preferred = _PREFERRED_ON_DARK if bg_is_dark else _PREFERRED_ON_LIGHT

    best_shade: Optional[str] = None
    best_contrast = 0.0
    for shade in sort_shade_keys(candidates.keys()):
        try:
            ratio = contrast_ratio(bg, candidates[shade])
        except InvalidColorFormat as exc:
            _warn(warnings, "invalid_candidate", f"Skipping shade {shade}: {exc}")
            continue
        # Preferred and non-preferred shades compete on the same terms.
        if ratio > best_contrast:
            best_shade = shade
            best_contrast = ratio

    if best_shade is None:
        _warn(warnings, "invalid_palette", "No candidate shade has a valid color")
        return ShadeSelection(
            shade=DEFAULT_TEXT_SHADE,
            background_is_dark=bg_is_dark,
            preferred=preferred,
            warnings=warnings,
            used_default=True,
        )

    meets = best_contrast >= MIN_TEXT_CONTRAST
    if not meets:
        _warn(
            warnings,
            "below_minimum",
            f"No text shade meets the minimum contrast of {MIN_TEXT_CONTRAST}:1 for background "
            f"color {bg.hex}. Best available contrast is {best_contrast:.2f}:1 with shade {best_shade}.",
        )
    return ShadeSelection(
        shade=best_shade,
        ratio=best_contrast,
        meets_minimum=meets,
        background_is_dark=bg_is_dark,
        preferred=preferred,
        warnings=warnings,
    )


def find_best_contrast_shade(background: object, candidates: object) -> str:
    """Return the key of the best-contrast text shade for ``background``."""
    return select_best_contrast_shade(background, candidates).shade


def suggest_color_mode_shades(
    bg_shade_light: str,
    color_shades: Mapping[str, str],
    text_shades: Mapping[str, str],
    *,
    auto_suggest_dark: bool = True,
    auto_suggest_text: bool = True,
) -> ColorModeSuggestion:
    """Suggest dark background and light/dark text shades for a light background shade.

    The dark-mode background always resolves through the complementary table;
    ``auto_suggest_dark`` only controls whether that shade is reported.
    Text shades are None when auto-suggestion is off or the background shade is
    absent from ``color_shades``.
    """
    dark_shade = suggest_complementary_shade(bg_shade_light) if bg_shade_light else FALLBACK_DARK_SHADE
    text_light: Optional[str] = None
    text_dark: Optional[str] = None
    if auto_suggest_text:
        bg_light = color_shades.get(bg_shade_light)
        bg_dark = color_shades.get(dark_shade)
        if bg_light:
            text_light = find_best_contrast_shade(bg_light, text_shades)
        if bg_dark:
            text_dark = find_best_contrast_shade(bg_dark, text_shades)
    return ColorModeSuggestion(
        bg_shade_light=bg_shade_light,
        bg_shade_dark=dark_shade if auto_suggest_dark else None,
        text_shade_light=text_light,
        text_shade_dark=text_dark,
    )
