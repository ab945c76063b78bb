# solong

A small top-down tile game. The map is read from a `.ber` text file. The
player walks around it collecting every plant. Once the last one is
picked up, the door opens. Walking through the open door ends the game.
Every move is counted, and the new total is printed to standard output
as `steps: N`.

## Installing

```
pip install .
```

The window is drawn with pygame.

## Playing

```
solong maps/level.ber
```

Options:

| Option           | Effect                                                      |
|------------------|-------------------------------------------------------------|
| `--bonus`        | allow enemies (`X`) in the map, let them patrol, and show the step counter in a bar under the map |
| `--debug`        | print the map rows, its size and its counts before playing  |
| `--assets DIR`   | directory holding the sprite images (default `assets/xpm`)  |

Keys:

| Key                 | Action     |
|---------------------|------------|
| `W` / Up arrow      | move up    |
| `A` / Left arrow    | move left  |
| `S` / Down arrow    | move down  |
| `D` / Right arrow   | move right |
| `Esc`               | quit       |

Only one key press is taken per animation frame. Closing the window also
quits.

### Sprites

The game loads these images from the asset directory:

- `door_01.xpm` and `door_02.xpm`
- `plant_01.xpm` and `plant_02.xpm`
- `player_01.xpm` and `player_02.xpm`
- `wall_01.xpm`

With `--bonus` it also loads `enemy_01.xpm` to `enemy_04.xpm`.

If a file is missing or cannot be read, the program stops with
`Could not load image <name>`.

## Map files

A map is a rectangle of characters, one row per line, with the extension
`.ber`:

| Character | Meaning                       |
|-----------|-------------------------------|
| `0`       | empty floor                   |
| `1`       | wall                          |
| `C`       | collectible (plant)           |
| `E`       | exit door                     |
| `P`       | player start                  |
| `X`       | enemy (only with `--bonus`)   |

Example:

```
1111111111
1P0C00C0E1
1000110001
1111111111
```

A map must follow these rules:

- Every row has the same length, and there are at least two rows.
- The border is made entirely of walls.
- There is at least one collectible, one exit and one starting position.
  Only the first `P` counts; any later ones become floor.
- There are no empty lines inside the map. Leading and trailing newlines
  are fine.
- Only the characters listed above appear.

The map argument must also be acceptable:

- There is exactly one map argument.
- It ends in `.ber`.
- It has a name before the extension.

If the map or its argument breaks a rule, or the window cannot be set up,
the program writes `Error` and the reason on standard error and exits
with status 1. Otherwise it exits with status 0 when the game ends.

In bonus mode, enemies move one tile in a random direction every so
often. Walking into an enemy ends the game, and so does an enemy stepping
onto the player.

## Using it as a library

```python
from solong.mapfile import load_map, parse_map, MapError
from solong.game import Game, GameEnded
from solong.tiles import Direction, Key

info = load_map("maps/level.ber", allow_enemies=False)
game = Game(info, bonus=False)

game.move_player(Direction.RIGHT)   # prints "steps: 1" if the way is free
try:
    game.key_press(Key.ESC)
except GameEnded as end:
    print(end.reason)               # "quit"
```

`parse_map` checks map text without touching the disk. Both it and
`load_map` raise `MapError` on an invalid map.

`solong.animation` holds the per-frame updates:

- `render_exit` opens the doors.
- `animate` advances the sprites.
- `patrol_enemies` moves the enemies.
- `FrameCounter.tick` runs these on the game loop's schedule.

`solong.display.run_game` opens a pygame window for a game and returns
why it ended: `"closed"`, `"quit"`, `"escaped"` or `"caught"`.

## What it does not include

The package ships no sprite images and no sample maps. Supply your own
`.xpm` files in the asset directory and your own `.ber` maps.

## Running the tests

```
pip install .[test]
pytest
```