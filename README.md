# cubed

A small first-person maze explorer. It reads a `.cub` scene file that
describes the wall textures, the floor and ceiling colours and a map, then
renders the maze with textured raycasting in a resizable pygame window.

## Installing

```
pip install .
```

## Running

```
cubed path/to/map.cub
```

To draw an overhead map of the maze on top of the view, add `--minimap`:

```
cubed --minimap path/to/map.cub
```

Exactly one scene path is accepted, and it must end in `.cub`. Before the
window opens, the keyboard controls are printed on standard output. Errors
in the arguments, the scene file or a texture are reported on standard
error as

```
Error
<message>
Error code: <code> - <system description of the code>
```

and the command exits with that code as its status.

### Controls

| Key          | Action         |
|--------------|----------------|
| W            | Move forward   |
| S            | Move backward  |
| A            | Strafe left    |
| D            | Strafe right   |
| Left arrow   | Look left      |
| Right arrow  | Look right     |
| Esc          | Exit           |

Closing the window also exits. Moves into a wall cell are refused.

## Scene files

A scene file lists its elements first, in any order, each at most once:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- `NO`, `SO`, `WE`, `EA` name the wall textures. Each path must end in
  `.xpm` and name a file that can be opened.
- `F` and `C` set the floor and ceiling colours as `R,G,B`, where each
  component is a decimal number between 0 and 255.
- The map starts at the first line that begins with `1` (leading spaces
  allowed). It may contain `1` (wall), `0` (floor), spaces, and exactly one
  of `N`, `S`, `E`, `W`, which places the player in the middle of that cell
  and sets the direction they face.
- The map must be closed: no floor cell may touch a space or the outside of
  the map, and no map line may end in `0`. The map ends at its first empty
  line; nothing but blank lines may follow it.

### Textures

Textures are read from XPM files. The first two lines are skipped, the
third holds the width, height, number of colours and characters per pixel,
then come the colour table entries (each colour given as `#` followed by
hexadecimal digits) and one line per row of pixels.

## Using it as a library

The pieces can also be used on their own:

- `cubed.parser.load_scene` reads a `.cub` file and its textures into a
  `cubed.model.Scene`; `cubed.parser.parse_cub_lines` parses and validates
  lines already in memory into a `cubed.parser.SceneDescription`, without
  reading any texture.
- `cubed.xpm.load_xpm` reads an XPM texture into a `cubed.model.Texture`;
  `cubed.xpm.parse_xpm` does the same for lines in memory.
- `cubed.model.Scene.move_player`, `rotate_player` and `resize` change the
  scene the way the controls do; `cubed.app.handle_key` maps a pygame key
  to them.
- `cubed.raycast.render_scene` draws a scene into a `cubed.raycast.Frame`
  of the scene's size; `cubed.raycast.cast_ray` describes the wall hit for
  one screen column.
- `cubed.minimap.draw_minimap` adds an overhead map to a frame.
- `cubed.app.render_frame` renders a whole frame, with or without the
  minimap.
- `cubed.colors.parse_rgb` turns an `R,G,B` string into a packed colour.
- `cubed.grid` normalises and checks map rows.

Problems in the input are raised as `cubed.errors.CubError`, which carries
the message and an errno-style code; `cubed.errors.format_error` gives the
text the command prints for it.

## What it does not do

The viewer only explores: there are no doors, sprites, enemies, mouse
look or sound, and only XPM textures are read.