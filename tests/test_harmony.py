import pytest

from palette_engine.color import InvalidColorFormat
from palette_engine.contrast import relative_luminance
from palette_engine.harmony import (
    analogous_colors,
    complementary_color,
    monochromatic_colors,
    rotate_hue,
    split_complementary_colors,
    tetradic_colors,
    triadic_colors,
)


def test_complementary_of_primary():
    assert complementary_color("#FF0000") == "#00FFFF"
    assert complementary_color("#808080") == "#808080"  # gray has no hue


def test_triadic_primaries():
    assert triadic_colors("#F00") == ["#FF0000", "#00FF00", "#0000FF"]


def test_rotation_families_start_with_base():
    for family in (split_complementary_colors, tetradic_colors, triadic_colors):
        colors = family("#3182ce")
        assert colors[0] == "#3182CE"
    assert len(tetradic_colors("#3182CE")) == 4
    assert len(split_complementary_colors("#3182CE")) == 3


def test_rotate_full_turn_is_identity():
    assert rotate_hue("#FF0000", 360) == "#FF0000"


def test_analogous_count_and_validation():
    colors = analogous_colors("#3182CE", count=5, angle=20)
    assert len(colors) == 5
    assert colors[0] == "#3182CE"
    assert len(set(colors)) == 5
    assert analogous_colors("#3182CE", count=1) == ["#3182CE"]
    with pytest.raises(ValueError):
        analogous_colors("#3182CE", count=0)
    with pytest.raises(ValueError):
        analogous_colors("#3182CE", angle=0)


def test_monochromatic_light_to_dark():
    colors = monochromatic_colors("#3182CE", count=5)
    assert len(colors) == 5
    lums = [relative_luminance(c) for c in colors]
    assert all(a > b for a, b in zip(lums, lums[1:]))
    assert monochromatic_colors("#3182CE", count=1) == ["#3182CE"]


def test_harmony_rejects_invalid_color():
    with pytest.raises(InvalidColorFormat):
        complementary_color("red")
