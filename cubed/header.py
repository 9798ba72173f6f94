"""Scene file checks: file extensions, colour lines and the header block."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from cubed.model import Direction, SceneError
from cubed.textutils import parse_int

_TEXTURE_PREFIXES = {direction.value + " ": direction for direction in Direction}
_STRIP_PREFIXES = ("NO", "SO", "WE", "EA", "F", "C")
_COLOR_FIELD = re.compile(r"[ 0-9]*")


@dataclass
class Header:
    """Texture paths and floor and ceiling colours read from a scene file."""

    textures: dict[Direction, str] = field(default_factory=dict)
    floor_color: int = 0
    ceiling_color: int = 0


def check_extension(path: str, ext: str) -> None:
    """Raise SceneError unless path is long enough and ends with ext."""
    if len(path) < 5:
        raise SceneError("file name too short")
    if path[-4:] != ext[:4]:
        raise SceneError(f"file extension is not {ext}")


def parse_color(line: str) -> int:
    """Read an 'F r,g,b' or 'C r,g,b' line into a 0xRRGGBB value."""
    segments = line[1:].split(",")
    fields = len(segments) - 1 + (1 if segments[-1] else 0)
    if fields != 3 or any(_COLOR_FIELD.fullmatch(seg) is None for seg in segments):
        raise SceneError("bad colour format")
    red, green, blue = (parse_int(seg) for seg in segments[:3])
    if any(not 0 <= part <= 255 for part in (red, green, blue)):
        raise SceneError("bad colour value")
    return red << 16 | green << 8 | blue


def read_header(lines: list[str]) -> Header:
    """Collect the four texture paths and both colours from a scene's lines."""
    header = Header()
    found_colors: set[str] = set()
    for line in lines:
        direction = _TEXTURE_PREFIXES.get(line[:3])
        if direction is not None:
            if direction in header.textures:
                raise SceneError("several textures for the same direction")
            header.textures[direction] = line[2:].lstrip(" ")
        elif line.startswith("F "):
            header.floor_color = parse_color(line)
            found_colors.add("F")
        elif line.startswith("C "):
            header.ceiling_color = parse_color(line)
            found_colors.add("C")
    if len(header.textures) + len(found_colors) != 6:
        raise SceneError("missing information")
    if any(path == "" for path in header.textures.values()):
        raise SceneError("missing information")
    return header


def strip_header_lines(lines: list[str]) -> list[str]:
    """Blank out every header line so that only the map is left."""
    return ["" if line.startswith(_STRIP_PREFIXES) else line for line in lines]