"""Reading a whole scene file: header, map and wall textures."""

from __future__ import annotations

from cubed.header import check_extension, read_header, strip_header_lines
from cubed.mapcheck import load_map
from cubed.model import Direction, Scene, SceneError
from cubed.textutils import split_lines
from cubed.xpm import load_xpm

_TEXTURE_ORDER = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)


def read_text(path: str) -> str:
    """Return the whole content of the file at path."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise SceneError(f"{path} does not exist or is not accessible") from exc


def parse_scene(path: str) -> Scene:
    """Read and validate a .cub scene file and the textures it names."""
    check_extension(path, ".cub")
    lines = split_lines(read_text(path))
    header = read_header(lines)
    grid, player = load_map(strip_header_lines(lines))
    textures = {direction: load_xpm(header.textures[direction]) for direction in _TEXTURE_ORDER}
    return Scene(
        textures=textures,
        floor_color=header.floor_color,
        ceiling_color=header.ceiling_color,
        grid=grid,
        player=player,
    )


def _rgb(color: int) -> str:
    return f"{color} rgb({color >> 16 & 0xFF}, {color >> 8 & 0xFF}, {color & 0xFF})"


def describe_scene(scene: Scene, path: str) -> str:
    """Return a readable summary of a parsed scene."""
    player = scene.player
    parts = [
        f"\nFILE NAME : ./{path}\n",
        f"\nNO : {scene.texture(Direction.NORTH).path}\n",
        f"SO : {scene.texture(Direction.SOUTH).path}\n",
        f"WE : {scene.texture(Direction.WEST).path}\n",
        f"EA : {scene.texture(Direction.EAST).path}\n",
        f"\nFLOOR : {_rgb(scene.floor_color)}\n",
        f"CEILING : {_rgb(scene.ceiling_color)}\n",
        "\nMAP :\n",
        *(f"{row}\n" for row in scene.grid),
        f"\nMAP HEIGHT : {scene.height}, MAP WIDTH : {scene.width}\n",
        f"\nPLAYER POSITION : x = {player.pos.x:f}, y = {player.pos.y:f}\n",
        f"PLAYER DIRECTION : x = {player.dir.x:f}, y = {player.dir.y:f}\n\n",
    ]
    return "".join(parts)