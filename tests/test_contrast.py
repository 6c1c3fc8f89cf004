import pytest

from palette_engine.color import InvalidColorFormat
from palette_engine.contrast import (
    ContrastLevel,
    accessible_text_color,
    contrast_ratio,
    passes,
    passes_aa,
    passes_aa_large,
    passes_aaa,
    relative_luminance,
    validate_contrast,
    wcag_compliance,
)


def test_relative_luminance_monotonic():
    # White > Gray > Black
    white = "#ffffff"
    gray = "#777777"
    black = "#000000"
    assert relative_luminance(white) > relative_luminance(gray) > relative_luminance(black)
    assert relative_luminance(black) == 0
    assert relative_luminance(white) == pytest.approx(1.0)


@pytest.mark.parametrize("color", ["#000000", "#FFFFFF", "#3182CE", "#abc", "#7F7F7F"])
def test_contrast_with_itself_is_one(color):
    assert contrast_ratio(color, color) == 1.0


def test_contrast_ratio_white_black():
    assert abs(contrast_ratio("#ffffff", "#000000") - 21.0) < 1e-3


@pytest.mark.parametrize(
    "a,b",
    [("#3182CE", "#FFFFFF"), ("#123", "#FEDCBA"), ("#777777", "#000000")],
)
def test_contrast_ratio_symmetric(a, b):
    assert contrast_ratio(a, b) == contrast_ratio(b, a)


def test_contrast_ratio_range():
    ratio = contrast_ratio("#3182CE", "#FFFFFF")
    assert 1.0 <= ratio <= 21.0


def test_contrast_ratio_propagates_parse_errors():
    with pytest.raises(InvalidColorFormat):
        contrast_ratio("blue", "#FFFFFF")


def test_threshold_boundaries():
    assert passes_aa(4.5)
    assert not passes_aa(4.499)
    assert passes_aaa(7.0)
    assert not passes_aaa(6.999)
    assert passes_aa_large(3.0)
    assert not passes_aa_large(2.999)


def test_contrast_levels():
    assert ContrastLevel.AA_LARGE.threshold == 3.0
    assert ContrastLevel.AA.threshold == 4.5
    assert ContrastLevel.AAA.threshold == 7.0
    assert ContrastLevel.AA_LARGE.label == "AALarge"
    assert passes(4.5, ContrastLevel.AA)


def test_wcag_compliance_flags():
    assert wcag_compliance(5.0) == {"AALarge": True, "AA": True, "AAA": False}
    assert wcag_compliance(2.0) == {"AALarge": False, "AA": False, "AAA": False}


def test_accessible_text_color():
    assert accessible_text_color("#000000") == "#FFFFFF"
    assert accessible_text_color("#FFFFFF") == "#000000"
    assert accessible_text_color("#1A202C") == "#FFFFFF"


def test_validate_contrast_reports_failures():
    failures = validate_contrast(
        [
            ("#000000", "#FFFFFF", "Body text"),
            ("#777777", "#888888", "Muted on muted"),
            ("nothex", "#FFFFFF", "Broken"),
        ]
    )
    assert len(failures) == 2
    assert any(f.startswith("[contrast-fail] Muted on muted") for f in failures)
    assert any(f.startswith("[resolve-error] Broken") for f in failures)
    assert not any("Body text" in f for f in failures)


def test_validate_contrast_custom_threshold():
    failures = validate_contrast([("#777777", "#FFFFFF", "Gray")], threshold=3.0)
    assert not failures
