"""Small text helpers used by the scene and texture parsers."""

from __future__ import annotations

import re

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")
_SPACE = " \t\n\v\f\r"


def split_lines(text: str) -> list[str]:
    """Split on newlines, keeping empty lines but not a final empty one."""
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines


def split_words(text: str, sep: str) -> list[str]:
    """Split on a separator, dropping empty pieces."""
    return [piece for piece in text.split(sep) if piece]


def parse_int(text: str) -> int:
    """Read a leading decimal integer the way atoi does, as a 32-bit int.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. No digits gives 0.
    """
    match = _INT_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def parse_int_base(text: str, base: str) -> int:
    """Read a leading unsigned number whose digits are the characters of base.

    Leading whitespace is skipped; reading stops at the first character not
    in base.
    """
    if len(base) < 2:
        raise ValueError("a base needs at least two digits")
    value = 0
    for char in text.lstrip(_SPACE):
        digit = base.find(char)
        if digit < 0:
            break
        value = value * len(base) + digit
    return value