# cubmap

`cubmap` checks `.cub` scene files for a grid-based raycasting game. It also reads the
XPM images that such scenes use as wall textures.

## Installing

```
pip install .
```

## Checking a map from the command line

```
cubmap level.cub
```

The command takes exactly one argument. The extension check looks at the text after
the *first* dot in the path, and that text must be exactly `cub`. A path such as
`./maps/level.cub` is therefore rejected, but `maps/level.cub` is accepted.

A scene file has two parts. The header comes first:

- `NO`, `SO`, `WE`, `EA`: texture paths. All four are required, and each one must be
  a file that can be opened for reading.
- `F` and `C`: the floor and ceiling colours, written as `R,G,B` with each channel in
  the range 0–255. Neither line is required.

The map grid comes after the header. It starts at the first line that is not a header
line, is not blank, and contains a `1`, and it runs to the end of the file. The grid is
made of `0` (floor), `1` (wall), whitespace, and exactly one player start (`N`, `S`,
`E` or `W`). The player start must have a `0` beside it. Whitespace inside the map must
not touch floor or the player start, and the walls must close the map.

When the map is valid, the command prints the padded grid (framed with `X`, whitespace
shown as `L`, outside flood-filled with `Z`) followed by `Map is closed!`, and exits
with status 0. When it is not valid, it writes a line that starts with `Error:` to
standard error and exits with status 1.

Example:

```
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

## Using it from Python

```python
from cubmap.mapfile import MapError, load

try:
    info = load("level.cub")
except MapError as exc:
    print(exc)
else:
    print(info.no, hex(info.floor), info.player_x, info.player_y)
```

`load` returns a `MapInfo`, which has these fields:

- `lines`: the file's lines
- `grid`: the map lines
- `no`, `so`, `we`, `ea`: the texture paths
- `floor`, `ceiling`: the colours packed as `0xRRGGBB`, or `None` when absent
- `player_x`, `player_y`: where the player starts
- `filled`: the padded, flood-filled grid

You can also run the separate steps yourself. They are `check_extension`,
`read_lines`, `parse_header`, `extract_map`, `check_playable`, `check_characters`,
`pad_map`, `check_spaces`, `flood_fill` and `validate_map`, and each one raises
`MapError` on failure.

### Textures

```python
from cubmap.xpm import xpm_file_to_image

image = xpm_file_to_image("north.xpm", bpp=32, endian=0)
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

`xpm_to_image` does the same for XPM data that is already in memory, given as a
sequence of strings. Both functions raise `XpmError` for data they cannot read.

The result is a `cubmap.image.Image`. It holds a raw byte buffer (`data`) with rows
`size_line` bytes apart, and it has `put_pixel`, `get_pixel` and `set_row_pixel`.

In colour definitions, `cubmap.colors.lookup_color` resolves names such as
`"navy blue"` and `#rrggbb` values. A colour of `None` becomes `0xFF000000`. For
visuals shallower than 24 bits, `cubmap.visual.rgb_shifts` and `cubmap.visual.good_color`
convert `0xRRGGBB` colours to pixel values.

## What it does not do

`cubmap` only reads and checks scenes and textures. It does not open a window, render
the scene, or run the game.