import pytest

from palette_engine.color import InvalidColorFormat
from palette_engine.contrast import relative_luminance
from palette_engine.palette import (
    SHADE_KEYS,
    generate_palette,
    is_shade_key,
    sort_shade_keys,
    validate_scale,
)

SEEDS = ["#3182CE", "#000000", "#FFFFFF", "#FF0000", "#00FF00", "#123", "#FEDCBA", "#808080"]


def test_palette_has_exactly_ten_keys_in_order():
    scale = generate_palette("#3182CE")
    assert list(scale) == list(SHADE_KEYS)


def test_seed_recovered_at_500():
    assert generate_palette("#3182ce")["500"] == "#3182CE"
    assert generate_palette("#abc")["500"] == "#AABBCC"


def test_palette_deterministic():
    assert generate_palette("#3182CE") == generate_palette("#3182CE")


@pytest.mark.parametrize("seed", SEEDS)
def test_luminance_non_increasing(seed):
    scale = generate_palette(seed)
    lums = [relative_luminance(scale[k]) for k in SHADE_KEYS]
    assert all(a >= b for a, b in zip(lums, lums[1:]))
    assert lums[0] > lums[-1]


def test_reference_seed_ends():
    scale = generate_palette("#3182CE")
    assert scale["50"] == "#E0ECF8"
    assert scale["900"] == "#143452"
    assert relative_luminance(scale["50"]) > 0.75
    assert relative_luminance(scale["900"]) < 0.05


@pytest.mark.parametrize(
    "seed, expected",
    [("#2D2D2D", "#1F1F1F"), ("#555555", "#3B3B3B"), ("#A5A5A5", "#737373"), ("#AFAFAF", "#7A7A7A")],
)
def test_darker_shades_scale_channels(seed, expected):
    assert generate_palette(seed)["700"] == expected


def test_invalid_seed_raises():
    with pytest.raises(InvalidColorFormat):
        generate_palette("3182CE")


def test_shade_key_helpers():
    assert is_shade_key("50")
    assert not is_shade_key("950")
    assert not is_shade_key(50)
    assert sort_shade_keys(["900", "50", "accent", "100"]) == ["50", "100", "900", "accent"]
    assert sort_shade_keys(["\u00b2", "900", "50"]) == ["50", "900", "\u00b2"]


def test_validate_scale_clean_for_generated():
    assert validate_scale(generate_palette("#3182CE")) == []


def test_validate_scale_reports_issues():
    issues = validate_scale({"50": "#fff", "accent": "nope"})
    kinds = [i.kind for i in issues]
    assert kinds.count("missing_shade") == 9
    assert any(i.kind == "unexpected_shade" and i.key == "accent" for i in issues)
    assert any(i.kind == "invalid_color" and i.key == "accent" for i in issues)
