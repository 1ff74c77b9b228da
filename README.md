# dtts

A small arcade game built with pygame. A bird flies left and right across
the arena, bouncing off the walls. Every bounce scores a point, and new
spikes appear on the wall the bird is heading for. Touch a wall spike, the
floor or the ceiling, and the round ends a moment later.

## Installing

```
pip install .
```

## Playing

```
dtts
```

Options:

- `--data PATH`: the progress file to read and write (default: `data` in
  the working directory).
- `--cell PIXELS`: the size of one grid cell. The window is 9 cells wide and
  14 cells high. Without this option the cell size is the desktop height
  divided by 19 (72 pixels if the desktop height cannot be used).

Controls:

- **Menu**: press Space or click anywhere outside the shop button to start a
  round. Press Escape or close the window to quit. Click the shop button to
  open the skin shop.
- **In a round**: press Space or click to flap upwards. Closing the window
  quits the game.
- **Shop**: scroll with the mouse wheel to browse the twenty skin tiles.
  Click a locked tile to buy it if you have enough candy (prices run from
  100 to 300); buying also picks that skin. Click an unlocked tile to wear
  it and return to the menu. Press Escape or the return button to go back
  without choosing.

Candy appears beside the walls after each bounce; fly through it to collect
it. Every fifth point changes the colour of the arena, and the number of
side spikes grows with the score, one for every five points, up to eleven.

## Saved progress

The high score, candy count, bought skins and chosen skin are kept in a
small binary file (`data` unless `--data` says otherwise). It is read when
the menu, a round or the shop opens, and written when the bird dies and
when the shop closes. A missing file starts fresh progress.

## Game assets

Images, sounds and fonts are loaded from paths relative to the working
directory: `img/` (with the skins in `img/skins/`), `audio/` and `font/`.
Run `dtts` from the directory that holds them. Missing assets do not stop
the game: missing images are drawn blank, missing sounds stay silent and
missing fonts fall back to pygame's default font.

## Using the pieces

The game is split into modules that can be used on their own, for example
`dtts.spikes.Spikes` for the spike layout and collision test,
`dtts.bird.Bird` for the bird's flight, and `dtts.savedata.SaveData` for
reading and writing the progress file. `dtts.app.main` starts the game.

## Running the tests

```
pip install .[test]
pytest
```