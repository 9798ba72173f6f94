# cubed

A small first-person maze explorer. It reads a `.cub` scene file that gives
wall textures, floor and ceiling colours and a grid map. It checks that the
scene is valid, prints a summary of it, then opens an 800×600 window and draws
the maze with a raycaster.

## Installing

```
pip install .
```

The window and keyboard input use `pygame`. Tests need `pytest`
(`pip install .[test]`).

## Running

```
cubed path/to/scene.cub
```

Give exactly one argument, a file whose name ends in `.cub`. If the argument
count is wrong or the scene is invalid, a message starting with `Error` is
printed on standard error and the command exits with status 1. A valid scene
is summarised on standard output (texture paths, colours, map, map size,
player position and direction) before the window opens. If the window cannot
be opened, or the player can see out of the map, an error is printed and the
command exits with status 0.

### Controls

| Key         | Action                    |
|-------------|---------------------------|
| `W` / `S`   | move forward / backward   |
| `A` / `D`   | strafe left / right       |
| `←` / `→`   | turn the camera           |
| `Esc`       | quit                      |

Closing the window also quits. Holding a key repeats it. A step that would
bring the player within 0.2 cells of a wall is not taken.

## Scene files

A scene file starts with six header lines, in any order, with blank lines
allowed between them:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` give the wall texture for each direction. Each
  must name an existing file ending in `.xpm`. A texture direction may not be
  given twice.
- `F` and `C` give the floor and ceiling colour as three comma-separated
  values from 0 to 255 (digits and spaces only).

The map comes after the header and may not contain blank lines:

```
        1111111111111
        1000000000001
111111111011000001110000000000001
100000000011000001110111111111111
11110111111111011100000010001
11110111111111011101010010001
11000000110101011100000010001
10000000000000001100000010001
10000000000000001101010010001
11000001110101011111011110N0111
11110111 1110101 101111010001
11111111 1111111 111111111111
```

| Character          | Meaning                                       |
|--------------------|-----------------------------------------------|
| `1`                | wall                                          |
| `0`                | floor                                         |
| ` ` (space)        | void, which the player must never reach       |
| `N`, `S`, `E`, `W` | player start, facing that way (exactly one)   |

The map must be at least three rows high. Shorter rows count as padded with
void. The area the player can reach from the start must be closed in by
walls: it may not touch the map edge or any void cell.

### Textures

Textures are XPM files with one character per pixel. The header comment
`/* columns rows colors chars-per-pixel */` and the `/* pixels */` comment are
both required. Colours may be written as `#RRGGBB` (upper-case hex digits),
as `rgb(r, g, b)`, or as one of a set of common colour names such as `black`,
`white`, `red`, `navy` or `slategray` (case does not matter). Unknown colour
names and pixel characters missing from the palette give black. Texture rows
are sampled with a bit mask, so heights that are powers of two render
correctly.

## Using it as a library

```python
from cubed.parsing import parse_scene, describe_scene
from cubed.raycast import Frame, render
from cubed.app import prepare_player

scene = parse_scene("maps/level.cub")
print(describe_scene(scene, "maps/level.cub"))

prepare_player(scene.player)
frame = Frame()
render(scene, frame)
print(hex(frame.get_pixel(400, 300)))
```

- `cubed.parsing.parse_scene` returns a `cubed.model.Scene`; any problem with
  the scene or its textures raises `cubed.model.SceneError`, whose message is
  what the command prints.
- `cubed.raycast.cast_ray` gives the `RayHit` of one screen column;
  `render` fills a `Frame` of 0xRRGGBB pixels.
- `cubed.movement.move_player`, `rotate_left` and `rotate_right` change the
  player the way the keys do.
- `cubed.xpm.load_xpm` reads a single texture into a `cubed.model.Texture`.

## What it does not do

There are no sprites, doors, mouse look, minimap, sound or saved games: the
game is walking and turning in a textured maze with flat floor and ceiling
colours.