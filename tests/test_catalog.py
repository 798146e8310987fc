import math

import pytest

from filter_editor.core import ValueKind
from filter_editor.filters import FILTER_CATALOG, default_raw_value, filter_names, lookup


def test_catalog_has_eleven_filters():
    assert filter_names() == [
        "blur",
        "brightness",
        "contrast",
        "drop-shadow",
        "grayscale",
        "hue-rotate",
        "invert",
        "opacity",
        "saturate",
        "sepia",
        "url",
    ]


@pytest.mark.parametrize(
    "name, kind, unit, bounds",
    [
        ("blur", ValueKind.LENGTH, "px", (0, math.inf)),
        ("brightness", ValueKind.PERCENTAGE, "%", (0, math.inf)),
        ("saturate", ValueKind.PERCENTAGE, "%", (0, math.inf)),
        ("opacity", ValueKind.PERCENTAGE, "%", (0, 100)),
        ("hue-rotate", ValueKind.ANGLE, "deg", (0, 360)),
        ("url", ValueKind.FREE_TEXT, "", (None, None)),
    ],
)
def test_definitions(name, kind, unit, bounds):
    definition = lookup(name)
    assert definition.value_kind == kind
    assert definition.unit_suffix == unit
    assert definition.bounds == bounds


def test_free_text_placeholders():
    assert lookup("drop-shadow").placeholder == "x y radius color"
    assert lookup("url").placeholder == "example.svg#c1"
    assert not lookup("url").is_numeric


def test_lookup_unknown_returns_none():
    assert lookup("sharpen") is None


def test_lookup_ignores_case():
    assert lookup("Hue-Rotate") is lookup("hue-rotate")


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        FILTER_CATALOG["sharpen"] = FILTER_CATALOG["blur"]


def test_default_raw_values():
    assert default_raw_value(lookup("blur")) == "0px"
    assert default_raw_value(lookup("hue-rotate")) == "0deg"
    assert default_raw_value(lookup("sepia")) == "0%"
    assert default_raw_value(lookup("drop-shadow")) == ""
