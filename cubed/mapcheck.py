"""Extracting the map from a scene file and checking that it is closed."""

from __future__ import annotations

from cubed.model import SPAWN_DIRECTIONS, Cell, Player, SceneError, Vector

MIN_LEADING_BLANK_LINES = 6
MIN_MAP_ROWS = 3

_CELL_KINDS = {
    " ": Cell.EMPTY,
    "1": Cell.WALL,
    "0": Cell.SPACE,
    "N": Cell.SPAWN,
    "S": Cell.SPAWN,
    "E": Cell.SPAWN,
    "W": Cell.SPAWN,
}

# Up, right, down, left.
_NEIGHBOURS = ((0, -1), (1, 0), (0, 1), (-1, 0))


def extract_map(lines: list[str]) -> list[str]:
    """Return the map rows that follow the blanked-out header lines."""
    start = 0
    while start < len(lines) and lines[start] == "":
        start += 1
    if start < MIN_LEADING_BLANK_LINES:
        raise SceneError("invalid map file")
    rows = list(lines[start:])
    if not rows:
        raise SceneError("no map in file")
    if any(row == "" for row in rows):
        raise SceneError("invalid map")
    if len(rows) < MIN_MAP_ROWS:
        raise SceneError("map too small")
    return rows


def check_spawn_count(rows: list[str]) -> None:
    """Raise SceneError unless the map holds exactly one spawn letter."""
    spawns = sum(row.count(letter) for row in rows for letter in "NEWS")
    if spawns != 1:
        raise SceneError("no spawn or several spawns")


def build_cells(rows: list[str]) -> list[list[Cell]]:
    """Classify every map character; short rows are padded with empty cells."""
    width = max((len(row) for row in rows), default=0)
    cells = []
    for row in rows:
        kinds = []
        for char in row:
            try:
                kinds.append(_CELL_KINDS[char])
            except KeyError:
                raise SceneError("invalid character in map") from None
        kinds.extend([Cell.EMPTY] * (width - len(kinds)))
        cells.append(kinds)
    return cells


def find_spawn(rows: list[str], cells: list[list[Cell]]) -> Player:
    """Place the player in the centre of the spawn cell, facing its letter."""
    player = Player()
    for y, line in enumerate(cells):
        for x, kind in enumerate(line):
            if kind is not Cell.SPAWN:
                continue
            player.pos = Vector(x + 0.5, y + 0.5)
            direction = SPAWN_DIRECTIONS.get(rows[y][x])
            if direction is not None:
                player.dir = direction
    return player


def reachable_cells(cells: list[list[Cell]], start: tuple[int, int]) -> set[tuple[int, int]]:
    """Return every (x, y) the player can walk to from start without crossing a wall."""
    height = len(cells)
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if (nx, ny) in seen:
                continue
            if not (0 <= ny < height and 0 <= nx < len(cells[ny])):
                continue
            if cells[ny][nx] is Cell.WALL:
                continue
            seen.add((nx, ny))
            stack.append((nx, ny))
    return seen


def check_closed(cells: list[list[Cell]], reachable: set[tuple[int, int]]) -> None:
    """Raise SceneError if the player can reach the map's edge or an empty cell."""
    height = len(cells)
    width = max((len(line) for line in cells), default=0)
    borders = (
        ((x, 0) for x in range(width)),
        ((x, height - 1) for x in range(width)),
        ((0, y) for y in range(height)),
        ((width - 1, y) for y in range(height)),
    )
    for border in borders:
        if any(position in reachable for position in border):
            raise SceneError("map not closed")
    if any(cells[y][x] is Cell.EMPTY for x, y in reachable):
        raise SceneError("player can move onto an empty cell")


def load_map(lines: list[str]) -> tuple[list[str], Player]:
    """Extract and validate the map; return its rows and the spawned player."""
    rows = extract_map(lines)
    check_spawn_count(rows)
    cells = build_cells(rows)
    player = find_spawn(rows, cells)
    start = (int(player.pos.x), int(player.pos.y))
    check_closed(cells, reachable_cells(cells, start))
    return rows, player