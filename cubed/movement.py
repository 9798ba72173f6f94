"""Player movement and camera rotation."""

from __future__ import annotations

import math
from enum import IntEnum

from cubed.model import MOVE_SPEED, PLAYER_SIZE, RADIAN, Player, Scene, Vector


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307
    LEFT = 65361
    RIGHT = 65363


_MOVEMENT_KEYS = frozenset({Key.W, Key.A, Key.S, Key.D})


def is_movement_key(keycode: int) -> bool:
    """Tell whether keycode moves the player."""
    return keycode in _MOVEMENT_KEYS


def _rotated(vector: Vector, cos_a: float, sin_a: float) -> Vector:
    return Vector(vector.x * cos_a - vector.y * sin_a, vector.x * sin_a + vector.y * cos_a)


def rotate(player: Player, angle: float) -> None:
    """Turn the view direction and the camera plane by angle radians."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    player.dir = _rotated(player.dir, cos_a, sin_a)
    player.plan = _rotated(player.plan, cos_a, sin_a)


def rotate_left(player: Player) -> None:
    """Turn the camera to the left."""
    rotate(player, -RADIAN)


def rotate_right(player: Player) -> None:
    """Turn the camera to the right."""
    rotate(player, RADIAN)


def _is_wall(grid: list[str], column: int, row: int) -> bool:
    if not (0 <= row < len(grid) and 0 <= column < len(grid[row])):
        return True
    return grid[row][column] == "1"


def collides(grid: list[str], x: float, y: float, size: float) -> bool:
    """Tell whether a square of half-side size centred on (x, y) touches a wall."""
    left, right = int(x - size), int(x + size)
    top, bottom = int(y - size), int(y + size)
    return any(
        _is_wall(grid, column, row)
        for row in range(top, bottom + 1)
        for column in range(left, right + 1)
    )


def move_player(scene: Scene, key: int) -> bool:
    """Step the player for a movement key; return whether the step was taken."""
    player = scene.player
    offsets = {
        Key.W: player.dir * MOVE_SPEED,
        Key.S: -(player.dir * MOVE_SPEED),
        Key.A: -(player.plan * MOVE_SPEED),
        Key.D: player.plan * MOVE_SPEED,
    }
    new_pos = player.pos + offsets.get(key, Vector())
    if collides(scene.grid, new_pos.x, new_pos.y, PLAYER_SIZE):
        return False
    player.pos = new_pos
    return True