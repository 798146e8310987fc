import pytest

from filter_editor.core import ParseError
from filter_editor.filters import coerce, format_number, lookup, round_tenths


def test_free_text_is_unchanged():
    assert coerce(lookup("drop-shadow"), "2px 2px 1px red") == ("2px 2px 1px red", "")


def test_free_text_with_unbalanced_parentheses_raises():
    with pytest.raises(ParseError):
        coerce(lookup("drop-shadow"), "2px 2px rgb(0,0,0")


def test_number_and_unit_are_split():
    assert coerce(lookup("blur"), "30px") == (30.0, "px")
    assert coerce(lookup("hue-rotate"), "90.5deg") == (90.5, "deg")


def test_non_canonical_unit_is_kept():
    assert coerce(lookup("blur"), "2em") == (2.0, "em")
    assert coerce(lookup("hue-rotate"), "1turn") == (1.0, "turn")


def test_unitless_percentage_is_scaled():
    assert coerce(lookup("opacity"), "0.5") == (50.0, "%")
    assert coerce(lookup("brightness"), "2") == (200.0, "%")


def test_unitless_length_keeps_empty_unit():
    assert coerce(lookup("blur"), "0") == (0.0, "")


def test_clamps_to_upper_bound():
    assert coerce(lookup("grayscale"), "150%") == (100.0, "%")
    assert coerce(lookup("hue-rotate"), "400deg") == (360.0, "deg")


def test_clamps_to_zero_lower_bound():
    assert coerce(lookup("blur"), "-5px") == (0.0, "px")


def test_unbounded_max_is_not_clamped():
    assert coerce(lookup("brightness"), "1000%") == (1000.0, "%")


@pytest.mark.parametrize("raw", ["", "px", "abc", "5px 3px", "5px!", "--5px", "inf"])
def test_invalid_numeric_values_raise(raw):
    with pytest.raises(ParseError):
        coerce(lookup("blur"), raw)


@pytest.mark.parametrize(
    "value, expected",
    [(0.15, 0.2), (0.25, 0.3), (-0.25, -0.3), (1.04, 1.0), (2.0, 2.0), (33.33, 33.3)],
)
def test_round_tenths_half_away_from_zero(value, expected):
    assert round_tenths(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(30.0, "30"), (2.5, "2.5"), (-0.0, "0"), (0.25, "0.25"), (1e-05, "0.00001")],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_overflowing_unitless_percentage_raises():
    with pytest.raises(ParseError):
        coerce(lookup("brightness"), "1e307")
