# cursetris

A falling-block puzzle game that runs in your terminal. It draws with the
standard-library `curses` module, so it needs a terminal where `curses` is
available (Linux, macOS and other POSIX systems).

The board is 10 columns wide and 20 rows tall. Pieces fall on their own. A
piece lands when it can no longer move down, and a new piece then appears at
the top. Full rows are cleared.

Each cleared row is worth 100 points times the current level. The level goes
up by one for every ten rows cleared, and pieces fall faster at higher levels.
The game ends when a new piece has no room to appear.

## Installing

```
pip install .
```

## Playing

```
cursetris
```

| Key         | Action                        |
|-------------|-------------------------------|
| Left/Right  | move the piece sideways       |
| Down        | move the piece down one row   |
| Up          | rotate the piece              |
| Space       | drop the piece to the bottom  |
| q           | quit                          |

The sidebar shows your score, the high score, the level and the next piece.
When the game ends, press any key to leave.

### Options

| Option                      | Meaning                                                          |
|-----------------------------|------------------------------------------------------------------|
| `--pieces standard`         | play with all seven pieces I, O, T, S, Z, J, L (the default)     |
| `--pieces classic`          | play with only the I and O pieces                                |
| `--random`                  | pick each next piece at random instead of cycling through them   |
| `--seed N`                  | seed for the random choices (default 888)                        |
| `--debug`                   | show the falling piece's position, rotation and piece number     |

Without `--random`, the first piece is chosen at random from the seed and the
pieces after it follow in set order. To see the full list of options, run:

```
cursetris --help
```

## Using it as a library

The game rules in `cursetris.game` do not depend on a terminal, so you can
drive them from your own code:

```python
from cursetris.game import Action, Game
from cursetris.pieces import standard_tetrominoes
from cursetris.ui import render_lines

game = Game(standard_tetrominoes(), None, True)
game.handle_action(Action.LEFT)
game.update()
print("\n".join(render_lines(game, False)))
```

- `cursetris.pieces` holds the shape tables: `standard_tetrominoes()` and
  `classic_tetrominoes()`.
- `cursetris.game` holds `Game`, the `Action` commands, `is_valid_position()`
  and `load_high_score()`. A `Game` offers `handle_action()`, `update()` (one
  frame of gravity), `move()`, `drop()`, `rotate()`, `spawn()`, `land()` and
  `clear_lines()`.
- `cursetris.ui` holds `render_lines()`, which lays a game out as text lines,
  `key_to_action()`, and `Screen`, which draws on a `curses` window.
- `cursetris.app` holds the command: `parse_args()`, `build_game()`, `run()`
  and `main()`.

## What it does not do

- The high score is fixed at 2200. Scores are not saved between games, and
  the high score shown never changes.
- There is no pause, no hold piece and no ghost piece.

## Running the tests

```
pip install ".[test]"
pytest
```