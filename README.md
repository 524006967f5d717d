# linkcross

A small arena simulation. Inside a circular arena of radius 100, particles
drift, bounce off the wall and split in two when their counter reaches
500; *faiseurs* — snakes made of a row of circular elements — crawl
around, bounce off the wall and hold still when their next step would
touch another faiseur. A chain of articulations, rooted near the arena
boundary, is read from the game file and drawn on top. Each update lowers
the score by one.

## Installing

```
pip install .
```

The window is built with tkinter from the standard library; there are no
other dependencies.

## Running

```
linkcross path/to/game.txt
```

The command needs exactly one argument, the game file to load; with any
other number of arguments it exits with status 1 without opening a window.

The window has buttons to exit, open another file, save the current state,
restart from the last file, start/stop the simulation and advance it by one
step, plus a choice between the *Construction* and *Guidage* chain modes.
The info panel shows the score and the number of particles, faiseurs and
articulations. While the simulation runs, it updates every 25 ms and the
other buttons are disabled.

If a file cannot be read, or breaks a rule of the format, the message is
printed on standard output, the drawing area stays blank and the save,
start and step buttons are disabled.

Keyboard shortcuts:

| key | action                         |
|-----|--------------------------------|
| `1` | advance one step (when paused) |
| `s` | start or stop the simulation   |
| `r` | restart from the loaded file   |

Only file names ending in `.txt` are taken from the open and save dialogs.

## Game file format

Blank lines are ignored, and lines starting with `#` are comments. The
remaining lines come in this order:

1. the score, within `]0, 8000]`;
2. the number of particles (at most 50), then one line per particle:
   `x y angle displacement counter`, the counter within `[0, 500[`;
3. the number of faiseurs, then one line per faiseur:
   `x y angle displacement radius element_count`, the radius within
   `[1.5, 5]` and the element count strictly positive;
4. the number of articulations (zero means no chain), then one line per
   articulation: `x y`; the first must lie within capture distance (18)
   of the arena boundary and each next one within 18 of the previous;
5. the chain mode: `CONSTRUCTION` or `GUIDAGE`.

Every displacement must lie within `[0, 2.5]`, and every entity must be
inside the arena. Elements of different faiseurs may not overlap, and no
articulation may lie inside a faiseur element. The first rule a file
breaks is reported with a message such as:

```
score (0) must be within ]0, score_max]
```

Example:

```
# score
4000
# particles
1
	10 10 0.5 1.0 0
# faiseurs
1
	-40 20 1.2 2.0 3 4
# articulations
2
	0 -90
	0 -75
CONSTRUCTION
```

## Using it from Python

```python
from linkcross.game import Game
from linkcross.messages import ReadError

game = Game()
try:
    game.load("game.txt")
except ReadError as err:
    print(err.message, end="")
else:
    for _ in range(10):
        game.update()
    print(game.to_text())
    game.save("saved.txt")
```

- `Game.load(path)` reads a file and `Game.read(lines)` reads lines
  directly; both raise `linkcross.messages.ReadError` on a bad file and
  leave the board empty. `load` also lets `OSError` through.
- `Game.update()` runs one step; once the score is zero, the next update
  sets `game.status` to `Status.LOST`.
- `Game.to_text()` renders the board in the file format and
  `Game.save(path)` writes it. For faiseurs it writes the position, angle
  and speed they were created with, their radius and their number of
  elements.
- `Game.draw(painter)` draws through a `linkcross.graphic.Painter`, which
  works on any canvas offering tkinter's `create_line` and `create_oval`.
- `linkcross.gui.Window` holds the state behind the window's controls
  (`step`, `toggle_run`, `restart`, `open_file`, `save_file`) without
  needing a display.

## What it does not do

The chain cannot be built or steered: clicks and mouse movement on the
drawing area do nothing, the articulations never move during updates, and
the mode buttons only record the chosen mode (it is written when saving).
No game is ever won; a running game ends only when the score runs out.

## Tests

```
pip install .[test]
pytest
```