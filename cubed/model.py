"""Core data types shared by the parser, the renderer and the game loop."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

WIN_WIDTH = 800
WIN_HEIGHT = 600

MOVE_SPEED = 0.5
RADIAN = 0.5
PLAYER_SIZE = 0.2


class SceneError(Exception):
    """Raised when a scene description or one of its textures is invalid."""


class Direction(Enum):
    """A wall orientation, valued by its identifier in a scene file."""

    NORTH = "NO"
    SOUTH = "SO"
    EAST = "EA"
    WEST = "WE"


class Cell(IntEnum):
    """Kind of a map cell."""

    EMPTY = 0
    WALL = 1
    SPACE = 2
    SPAWN = 3


@dataclass(frozen=True)
class Vector:
    """A 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Vector:
        return Vector(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)


SPAWN_DIRECTIONS = {
    "N": Vector(0.0, -1.0),
    "S": Vector(0.0, 1.0),
    "E": Vector(1.0, 0.0),
    "W": Vector(-1.0, 0.0),
}


@dataclass
class Texture:
    """A wall texture: a grid of 0xRRGGBB colours, indexed by row then column."""

    path: str = ""
    width: int = 0
    height: int = 0
    data: list[list[int]] = field(default_factory=list)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} texture")
        return self.data[y][x]


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    pos: Vector = field(default_factory=Vector)
    dir: Vector = field(default_factory=Vector)
    plan: Vector = field(default_factory=Vector)


@dataclass
class Scene:
    """Everything a scene file describes: textures, colours, map and player."""

    textures: dict[Direction, Texture] = field(default_factory=dict)
    floor_color: int = 0
    ceiling_color: int = 0
    grid: list[str] = field(default_factory=list)
    player: Player = field(default_factory=Player)

    @property
    def width(self) -> int:
        """Length of the longest map row."""
        return max((len(row) for row in self.grid), default=0)

    @property
    def height(self) -> int:
        """Number of map rows."""
        return len(self.grid)

    def texture(self, direction: Direction) -> Texture:
        """Return the texture for walls facing the given direction."""
        try:
            return self.textures[direction]
        except KeyError:
            raise SceneError(f"no texture for {direction.name.lower()} walls") from None