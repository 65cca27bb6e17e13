# solong

A small top-down puzzle game played on a tile map. Walk your character
around the board, pick up every collectible, and then step onto the exit.
After each key press the move count is printed as `MOVEMENTS: <n>`.

## Installing

```
pip install .
```

The game window uses `pygame`. For the tests, install the `test` extra:

```
pip install .[test]
```

## Playing

```
solong maps/level.ber
```

The single argument must be a path ending in `.ber`. The command is
`solong.game:main`.

Controls:

| Key                | Action     |
|--------------------|------------|
| `W` / Up arrow     | move up    |
| `A` / Left arrow   | move left  |
| `S` / Down arrow   | move down  |
| `D` / Right arrow  | move right |
| `Esc`              | quit       |

Closing the window also quits. Moving onto the exit once every
collectible has been picked up ends the game; the exit cannot be entered
by moving down, and until then it blocks the way like a wall.

Each tile is drawn 128 pixels square. Textures are read from XPM files
under `textures/` relative to the current directory
(`Charizard-front.xpm`, `Charizard-back.xpm`, `Charizard-right.xpm`,
`Charizard-left.xpm`, `Waterfall-1.xpm`, `Grass.xpm`, `Poké_Ball_EP.xpm`,
`CentroPokemon.xpm`). A texture that is missing or cannot be read is
simply not drawn; no textures ship with the package.

## Map format

A map is a plain text file of equal-length rows built from these characters:

| Char | Meaning           |
|------|-------------------|
| `1`  | wall              |
| `0`  | empty floor       |
| `P`  | player start      |
| `C`  | collectible       |
| `E`  | exit              |

A valid map:

- is a rectangle fully enclosed by walls,
- ends its last row without a trailing newline,
- holds exactly one `P`, exactly one `E` and at least one `C`,
- lets the player reach every collectible and the exit (the exit cannot
  be walked through).

For example:

```
1111111
1P0C0E1
1111111
```

A bad argument or map stops the game with exit status 1 and one of
`Error, invalid map`, `Error, invalid characteres`, `Error, invalid fd`
or `Error, invalid argument` on standard output.

## Using it as a library

```python
from solong.game import Game, Direction, MoveResult

game = Game.from_file("maps/level.ber")
if game.move(Direction.RIGHT) is MoveResult.MOVED:
    print(game.player, game.collectibles)
```

`Game.handle_key(keycode)` takes the key codes the window uses and prints
the move count; `Game.tiles()` yields `(row, column, tile)` for drawing.

Other modules:

- `solong.errors`: `check_arg` and the error classes, all derived from
  `SoLongError`.
- `solong.lines`: `iter_lines` reads a text stream line by line in fixed
  chunks; `read_file_lines` reads a whole file.
- `solong.mapcheck`: `validate_map` checks a map given as lines,
  `load_map` reads and checks a file; both return a `MapInfo`.
- `solong.xpm`: `load_xpm` and `parse_xpm` decode XPM images into an
  `XpmImage` of 32-bit pixels.
- `solong.colors`: `lookup_color` and `text_to_rgb` for X11 colour names.
- `solong.printf`: `format_printf` and `ft_printf`, a small printf with
  the conversions `c s p d i u x X %`.