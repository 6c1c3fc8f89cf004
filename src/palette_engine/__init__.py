"""Palette generation and accessibility-contrast engine.

Pure functions over canonical color values: shade scale generation, WCAG
contrast checks, shade suggestions, harmonies and scale adjustments.
"""

from .color import Color, InvalidColorFormat, parse_color, normalize_hex, is_valid_color  # noqa: F401
from .contrast import (  # noqa: F401
    ContrastLevel,
    relative_luminance,
    contrast_ratio,
    passes,
    passes_aa,
    passes_aa_large,
    passes_aaa,
    wcag_compliance,
    accessible_text_color,
    validate_contrast,
)
from .palette import (  # noqa: F401
    SHADE_KEYS,
    PaletteIssue,
    generate_palette,
    sort_shade_keys,
    validate_scale,
)
from .shade_suggester import (  # noqa: F401
    ShadeSelection,
    ShadeWarning,
    ColorModeSuggestion,
    suggest_complementary_shade,
    find_best_contrast_shade,
    select_best_contrast_shade,
    suggest_color_mode_shades,
)
from .harmony import (  # noqa: F401
    complementary_color,
    analogous_colors,
    triadic_colors,
    split_complementary_colors,
    tetradic_colors,
    monochromatic_colors,
)
from .adjustment import ScaleAdjustment, adjust_scale, scale_differences  # noqa: F401
from .accessibility import ScaleAccessibilityReport, analyze_scale  # noqa: F401
from .code_generation import color_mode_value, color_mode_code  # noqa: F401

__all__ = [
    "Color",
    "InvalidColorFormat",
    "parse_color",
    "normalize_hex",
    "is_valid_color",
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
    "SHADE_KEYS",
    "PaletteIssue",
    "generate_palette",
    "sort_shade_keys",
    "validate_scale",
    "ShadeSelection",
    "ShadeWarning",
    "ColorModeSuggestion",
    "suggest_complementary_shade",
    "find_best_contrast_shade",
    "select_best_contrast_shade",
    "suggest_color_mode_shades",
    "complementary_color",
    "analogous_colors",
    "triadic_colors",
    "split_complementary_colors",
    "tetradic_colors",
    "monochromatic_colors",
    "ScaleAdjustment",
    "adjust_scale",
    "scale_differences",
    "ScaleAccessibilityReport",
    "analyze_scale",
    "color_mode_value",
    "color_mode_code",
]
