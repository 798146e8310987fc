"""
Tokenizer for CSS filter values.

Walks the string once, tracking parenthesis depth, and returns the
(name, raw value) pairs of every filter function in source order.
Only the function-call grammar of the `filter` property is understood.
"""

import re
from typing import List, Tuple

from ..core import ParseError


NONE_VALUE = "none"

_IDENTIFIER = re.compile(r"-?[A-Za-z_][A-Za-z0-9_-]*")

Token = Tuple[str, str]


def tokenize(css: str) -> List[Token]:
    """
    Split a filter value into (name, raw value) pairs.

    "blur(2px) url(a.svg#f)" -> [("blur", "2px"), ("url", "a.svg#f")]

    Inner parentheses are kept verbatim in the value. Raises ParseError on
    unbalanced parentheses, a missing or malformed function name, or text
    outside of any function.
    """
    if css.strip().lower() == NONE_VALUE:
        return []

    tokens: List[Token] = []
    current: List[str] = []
    name = ""
    depth = 0
    name_start = 0

    for offset, char in enumerate(css):
        if char == "(":
            depth += 1
            if depth == 1:
                name = "".join(current).strip()
                _check_name(name, name_start)
                current = []
                continue
        elif char == ")":
            if depth == 0:
                raise ParseError("Unmatched ')'", offset)
            depth -= 1
            if depth == 0:
                tokens.append((name, "".join(current).strip()))
                current = []
                name_start = offset + 1
                continue
        current.append(char)

    if depth > 0:
        raise ParseError(f"Unclosed '(' in {name!r}", len(css))

    trailing = "".join(current).strip()
    if trailing:
        raise ParseError(f"Unexpected text {trailing!r} outside a filter function", name_start)

    return tokens


def _check_name(name: str, offset: int) -> None:
    if not name:
        raise ParseError("Missing filter function name", offset)
    if not _IDENTIFIER.fullmatch(name):
        raise ParseError(f"Malformed filter function name {name!r}", offset)


def is_balanced(text: str) -> bool:
    """True if every '(' in text has a matching ')'."""
    depth = 0
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0
