"""Engine-wide constants for palette generation and contrast checks."""

from __future__ import annotations

from typing import Final, Tuple

# WCAG 2.1 minimum ratios
AA_LARGE_RATIO: Final = 3.0
AA_RATIO: Final = 4.5
AAA_RATIO: Final = 7.0

SHADE_KEYS: Final[Tuple[str, ...]] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
)
BASE_SHADE: Final = "500"

# Returned by the best-contrast search when it cannot evaluate its inputs
DEFAULT_TEXT_SHADE: Final = "50"
# Returned by the complementary lookup for keys outside the table
FALLBACK_DARK_SHADE: Final = "800"

# Backgrounds below this relative luminance count as dark
DARK_BACKGROUND_LUMINANCE: Final = 0.45
MIN_TEXT_CONTRAST: Final = AA_RATIO

# Adjacent shades below this ratio are visually indistinct
MIN_ADJACENT_CONTRAST: Final = 1.1
# A scale should offer at least this many AA-readable shades
MIN_ACCESSIBLE_SHADES: Final = 3
