"""Ray casting of the scene into a frame of 0xRRGGBB pixels."""

from __future__ import annotations

import math
from array import array
from dataclasses import dataclass, field

from cubed.model import WIN_HEIGHT, WIN_WIDTH, Direction, Scene, SceneError, Vector

_TYPECODE = "I" if array("I").itemsize >= 4 else "L"
_COLOR_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class RayHit:
    """Where one screen column's ray meets a wall, and how to draw it."""

    map_x: int
    map_y: int
    side: int
    ray_dir: Vector
    perp_wall_dist: float
    line_height: int
    draw_start: int
    draw_end: int
    direction: Direction
    tex_x: int


@dataclass
class Frame:
    """An image of width x height pixels stored row by row."""

    width: int = WIN_WIDTH
    height: int = WIN_HEIGHT
    pixels: array = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("a frame needs a positive width and height")
        self.pixels = array(_TYPECODE, [0]) * (self.width * self.height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} frame")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at column x, row y."""
        self.pixels[self._index(x, y)] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at column x, row y."""
        return self.pixels[self._index(x, y)]

    def fill_background(self, ceiling: int, floor: int) -> None:
        """Paint the upper half with the ceiling colour, the rest with the floor colour."""
        split = self.width * (self.height // 2)
        total = self.width * self.height
        self.pixels[:split] = array(_TYPECODE, [ceiling & _COLOR_MASK]) * split
        self.pixels[split:] = array(_TYPECODE, [floor & _COLOR_MASK]) * (total - split)


def _inverse(value: float) -> float:
    return abs(1 / value) if value != 0 else math.inf


def _wall_direction(side: int, ray: Vector) -> Direction:
    if side == 0 and ray.x > 0:
        return Direction.EAST
    if side == 0 and ray.x < 0:
        return Direction.WEST
    if side == 1 and ray.y > 0:
        return Direction.SOUTH
    if side == 1 and ray.y < 0:
        return Direction.NORTH
    raise SceneError("ray hit a wall along its own direction")


def cast_ray(scene: Scene, x: int, width: int) -> RayHit:
    """Cast the ray of screen column x (out of width) with the DDA algorithm."""
    player = scene.player
    pos = player.pos
    camera_x = 2 * x / float(width) - 1
    ray = player.dir + player.plan * camera_x
    map_x, map_y = int(pos.x), int(pos.y)
    delta_x, delta_y = _inverse(ray.x), _inverse(ray.y)

    if ray.x < 0:
        step_x, side_x = -1, (pos.x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - pos.x) * delta_x
    if ray.y < 0:
        step_y, side_y = -1, (pos.y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - pos.y) * delta_y

    grid = scene.grid
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if not (0 <= map_y < len(grid) and 0 <= map_x < len(grid[map_y])):
            raise SceneError("ray left the map")
        if grid[map_y][map_x] == "1":
            break

    if side == 0:
        perp = (map_x - pos.x + (1 - step_x) // 2) / ray.x
    else:
        perp = (map_y - pos.y + (1 - step_y) // 2) / ray.y
    line_height = int(WIN_HEIGHT / perp) if perp > 0 else WIN_HEIGHT

    half_line = int(line_height / 2)
    draw_start = max(WIN_HEIGHT // 2 - half_line, 0)
    draw_end = min(half_line + WIN_HEIGHT // 2, WIN_HEIGHT - 1)

    direction = _wall_direction(side, ray)
    texture = scene.texture(direction)
    if texture.width <= 0 or texture.height <= 0:
        raise SceneError(f"texture {texture.path!r} is empty")
    wall_x = pos.y + perp * ray.y if side == 0 else pos.x + perp * ray.x
    tex_x = int(math.fmod(int(wall_x * texture.width), texture.width))

    return RayHit(
        map_x=map_x,
        map_y=map_y,
        side=side,
        ray_dir=ray,
        perp_wall_dist=perp,
        line_height=line_height,
        draw_start=draw_start,
        draw_end=draw_end,
        direction=direction,
        tex_x=tex_x,
    )


def _draw_column(scene: Scene, frame: Frame, x: int, hit: RayHit) -> None:
    if hit.line_height <= 0:
        return
    texture = scene.texture(hit.direction)
    column = [row[hit.tex_x] for row in texture.data]
    ratio = texture.height / hit.line_height
    mask = texture.height - 1
    half = frame.height // 2
    half_line = int(hit.line_height / 2)
    top = half - half_line
    end = min(half + half_line, frame.height)
    step = 0.0
    if top < 0:
        step = -top * ratio
        top = 0
    pixels = frame.pixels
    width = frame.width
    for y in range(top, end):
        pixels[y * width + x] = column[int(step) & mask] & _COLOR_MASK
        step += ratio


def render(scene: Scene, frame: Frame) -> Frame:
    """Draw the background and every wall column of the scene into frame."""
    frame.fill_background(scene.ceiling_color, scene.floor_color)
    for x in range(frame.width):
        _draw_column(scene, frame, x, cast_ray(scene, x, frame.width))
    return frame