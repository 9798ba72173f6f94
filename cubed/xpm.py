"""Reading wall textures from XPM files."""

from __future__ import annotations

import re

from cubed.header import check_extension
from cubed.model import SceneError, Texture
from cubed.textutils import parse_int, parse_int_base, split_words

_HEADER_MARK = "/* columns rows colors chars-per-pixel */"
_PIXELS_MARK = "/* pixels */"
_HEX_DIGITS = "0123456789ABCDEF"
_DIGITS = re.compile(r"[0-9]+")

_NAMED_COLORS = (
    ("black", 0x000000),
    ("white", 0xFFFFFF),
    ("red", 0xFF0000),
    ("green", 0x00FF00),
    ("blue", 0x0000FF),
    ("yellow", 0xFFFF00),
    ("cyan", 0x00FFFF),
    ("magenta", 0xFF00FF),
    ("gray", 0x808080),
    ("darkgray", 0x404040),
    ("lightgray", 0xC0C0C0),
    ("orange", 0xFFA500),
    ("brown", 0xA52A2A),
    ("purple", 0x800080),
    ("pink", 0xFFC0CB),
    ("beige", 0xF5F5DC),
    ("olive", 0x808000),
    ("navy", 0x000080),
    ("teal", 0x008080),
    ("turquoise", 0x40E0D0),
    ("gold", 0xFFD700),
    ("silver", 0xC0C0C0),
    ("indigo", 0x4B0082),
    ("maroon", 0x800000),
    ("lime", 0x00FF00),
    ("coral", 0xFF7F50),
    ("lavender", 0xE6E6FA),
    ("salmon", 0xFA8072),
    ("plum", 0xDDA0DD),
    ("khaki", 0xF0E68C),
    ("orchid", 0xDA70D6),
    ("azure", 0xF0FFFF),
    ("slategray", 0x708090),
)


def strip_quotes(line: str) -> str:
    """Drop the opening quote and the closing quote (and comma, if any)."""
    if line.endswith(","):
        return line[1:-2]
    return line[1:-1]


def parse_color_value(spec: str) -> int:
    """Turn an XPM colour spec (#RRGGBB, rgb(...) or a name) into 0xRRGGBB."""
    if spec.startswith("#"):
        return parse_int_base(spec[1:], _HEX_DIGITS)
    if spec.startswith("rgb"):
        return rgb_value(spec)
    return named_color(spec)


def rgb_value(spec: str) -> int:
    """Read the first three numbers of an rgb(...) spec; missing ones are 0."""
    parts = [parse_int(digits) for digits in _DIGITS.findall(spec)[:3]]
    parts += [0] * (3 - len(parts))
    red, green, blue = parts
    return (red << 16) + (green << 8) + blue


def named_color(name: str) -> int:
    """Return the value of the first known colour name that starts the text."""
    lowered = name.lower()
    for color_name, value in _NAMED_COLORS:
        if lowered.startswith(color_name):
            return value
    return 0


def _header_numbers(text: str) -> tuple[int, int, int]:
    values = []
    pos = 0
    for _ in range(3):
        values.append(parse_int(text[pos:]))
        space = text.find(" ", pos)
        pos = len(text) if space < 0 else space + 1
    return values[0], values[1], values[2]


def _read_palette(lines: list[str], nb_colors: int) -> dict[str, int]:
    if len(lines) < nb_colors:
        raise SceneError("bad texture syntax")
    palette: dict[str, int] = {}
    for line in lines[: max(nb_colors, 0)]:
        entry = strip_quotes(line)
        if not entry:
            continue
        if len(entry) <= 4:
            raise SceneError("XPM color is invalid")
        palette.setdefault(entry[0], parse_color_value(entry[4:]))
    return palette


def parse_xpm(lines: list[str], path: str) -> Texture:
    """Build a texture from the non-empty lines of an XPM file."""
    try:
        start = lines.index(_HEADER_MARK)
    except ValueError:
        start = len(lines)
    if start + 2 >= len(lines):
        raise SceneError("bad texture syntax")
    width, height, nb_colors = _header_numbers(strip_quotes(lines[start + 1]))
    colors_start = start + 2
    palette = _read_palette(lines[colors_start:], nb_colors)
    try:
        marker = lines.index(_PIXELS_MARK, colors_start)
    except ValueError:
        marker = len(lines)
    if marker + 1 >= len(lines):
        raise SceneError("bad texture syntax")
    data = [[0] * max(width, 0) for _ in range(max(height, 0))]
    for row, line in zip(data, lines[marker + 1 :]):
        pixels = strip_quotes(line)
        for column, char in enumerate(pixels[: len(row)]):
            row[column] = palette.get(char, 0)
    return Texture(path=path, width=width, height=height, data=data)


def load_xpm(path: str) -> Texture:
    """Check, read and parse the XPM file at path."""
    check_extension(path, ".xpm")
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError(f"cannot open {path}") from exc
    return parse_xpm(split_words(text, "\n"), path)