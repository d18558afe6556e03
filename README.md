# cubraycast

A small first-person raycasting engine. It reads a `.cub` scene description
(wall textures, floor and ceiling colours, and a grid map), checks it, and
opens a 1280x720 window where you can walk around the map.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running

```
cubraycast path/to/scene.cub
```

The program takes exactly one argument, and its name has to end in `.cub`
with at least one character before the extension. When the arguments are
wrong or the scene cannot be loaded, the program writes `Error` on one line
and a short reason on the next to standard error, and exits with status 1.

### Controls

| Key          | Action              |
|--------------|---------------------|
| W / S        | move forward / back |
| A / D        | strafe left / right |
| Left / Right | turn                |
| Esc          | quit                |

Closing the window quits too. The player keeps a small margin from walls and
cannot walk into wall or void cells.

## The `.cub` format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

* `NO`, `SO`, `WE` and `EA` give the wall texture for each compass side. Each
  may appear only once, and the path must not be empty. Spaces and tabs around
  the path are dropped.
* Textures ending in `.xpm` are read by the package's own XPM reader (hex
  colours and a few colour names). Any other file is loaded with pygame, so
  PNG, BMP and the other formats pygame reads work as well.
* `F` and `C` give the floor and ceiling colours as `R,G,B`. Each part is a
  number from 0 to 255, with no spaces around the commas. Trailing spaces are
  allowed.
* The elements can come in any order and may be separated by empty lines.
  All six must appear, and all before the map.
* The map is made of `0` (floor), `1` (wall), spaces (void) and exactly one
  player start, `N`, `S`, `E` or `W`, which also sets the direction the player
  faces. Shorter rows are padded with void.
* The map must be closed. No floor cell the player can reach may lead to void
  or to the edge of the map, and no floor cell anywhere may sit next to void
  or the edge. The map must be a single block: nothing but empty lines may
  follow it.

## Using it as a library

```python
from cubraycast.parser import parse_cub, parse_cub_text
from cubraycast.errors import CubError

try:
    cfg = parse_cub("scene.cub")
except CubError as exc:
    print(exc)
else:
    print(cfg.player, cfg.floor.value, cfg.ceil.value)
```

`parse_cub_text` does the same for a string already in memory. The result is
a `Config` (in `cubraycast.config`) holding `tex_paths`, `floor` and `ceil`
as `Rgb` values, the padded `map` (a `MapGrid`) and the `player` start.

Other modules:

* `cubraycast.scan`, `cubraycast.elements`, `cubraycast.mapgrid`: the
  individual parsing and validation steps that `parse_cub_text` runs.
* `cubraycast.player`: `Camera` keeps the position, view direction and camera
  plane, and provides `move`, `rotate` and `update`; `camera_for_player`
  builds one from a player start.
* `cubraycast.raycast`: `cast_ray` traces one screen column through the grid
  and returns a `Ray` holding the wall distance, the side that was hit and
  the texture index.
* `cubraycast.render`: `Image` is a pixel buffer of `0xRRGGBB` values, and
  `render_frame` draws ceiling, floor and textured walls into it.
* `cubraycast.game`: `load_texture` and `load_textures` read wall textures;
  `Game` ties a scene, camera and textures together. `Game.tick()` advances
  one frame and returns the rendered `Image` without opening a window, and
  `Game.run()` opens the window. `game_start` does both and returns an exit
  status.
* `cubraycast.errors`: `CubError` and `report`, which writes the
  `Error`-prefixed message.

## What it does not do

The engine draws walls, a flat floor and a flat ceiling, and lets the player
walk and turn. There are no sprites, enemies, weapons, doors, sound, mouse
look or minimap, and there is no collision with anything but wall and void
cells.