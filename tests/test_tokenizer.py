import pytest

from filter_editor.core import ParseError
from filter_editor.filters import tokenize


def test_tokenize_simple_list():
    assert tokenize("blur(2px) grayscale(50%)") == [("blur", "2px"), ("grayscale", "50%")]


def test_tokenize_none():
    assert tokenize("none") == []
    assert tokenize("  none ") == []
    assert tokenize("NONE") == []
    assert tokenize(" None") == []


def test_whitespace_between_tokens_is_insignificant():
    assert tokenize("  blur( 2px )\t  sepia(1)blur(3px) ") == [
        ("blur", "2px"),
        ("sepia", "1"),
        ("blur", "3px"),
    ]


def test_nested_parentheses_are_kept_verbatim():
    css = "drop-shadow(2px 2px 1px rgb(0, 0, 0)) url(a.svg#f)"
    assert tokenize(css) == [
        ("drop-shadow", "2px 2px 1px rgb(0, 0, 0)"),
        ("url", "a.svg#f"),
    ]


def test_inner_spacing_is_preserved():
    assert tokenize("drop-shadow(2px  2px red)") == [("drop-shadow", "2px  2px red")]


def test_empty_value():
    assert tokenize("url()") == [("url", "")]


@pytest.mark.parametrize(
    "css",
    [
        "blur(2px",
        "blur(2px) sepia(rgb(1)",
        "blur 2px)",
        "blur(2px))",
        "(2px)",
        "blur(2px) (3px)",
        "blur 2 (3px)",
        "blur(2px) sepia",
        "2blur(1px)",
    ],
)
def test_malformed_input_raises(css):
    with pytest.raises(ParseError):
        tokenize(css)


def test_parse_error_reports_offset():
    with pytest.raises(ParseError) as excinfo:
        tokenize("blur(2px))")
    assert excinfo.value.position == 9
