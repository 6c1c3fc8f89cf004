"""Color-mode code snippets for a chosen background/text shade pairing."""

from __future__ import annotations

__all__ = ["color_mode_value", "color_mode_code"]


def color_mode_value(color_key: str, shade_light: str, shade_dark: str) -> str:
    return f'useColorModeValue("{color_key}.{shade_light}", "{color_key}.{shade_dark}")'


def color_mode_code(
    bg_color_key: str,
    bg_shade_light: str,
    bg_shade_dark: str,
    text_color_key: str,
    text_shade_light: str,
    text_shade_dark: str,
) -> str:
    """Return the two-line ``bg`` / ``textColor`` declaration snippet."""
    bg_code = f"const bg = {color_mode_value(bg_color_key, bg_shade_light, bg_shade_dark)};"
    text_code = f"const textColor = {color_mode_value(text_color_key, text_shade_light, text_shade_dark)};"
    return f"{bg_code}\n{text_code}"
