# rubikcube

A small model of a 3x3 Rubik's cube. It keeps the 54 stickers of the six faces,
turns rows and columns, and draws the cube in the terminal with ANSI background
colours.

## Installing

```
pip install .
```

## Command line

```
rubikcube
```

This prints the solved cube, makes four turns on the outer right column and
the bottom row (column up, row left, row right, column down), and prints the
cube again. The faces are laid out side by side in this order: front, right,
back, left, top, down. The command takes no options other than `--help`.

## Library use

```python
from rubikcube.cube import RubiksCube, FRONT

cube = RubiksCube()
cube.rotate_up(2)      # turn the right column up
cube.rotate_left(2)    # turn the bottom row to the left
print(cube.is_solved())
print(cube.face(FRONT))  # the nine stickers of the front face
cube.show()            # write the coloured view to standard output
text = cube.render()   # or get the same view as a string
```

`RubiksCube` offers:

- `stickers`: all 54 stickers as a tuple of `ColorPiece` values, nine per face
  in row-major order, faces ordered front, right, back, left, top, down.
- `face(face)`: the nine stickers of one face; the module constants `FRONT`,
  `RIGHT`, `BACK`, `LEFT`, `TOP` and `DOWN` (0 to 5) name the faces. Any other
  index raises `ValueError`.
- `is_solved()`: true when every face shows a single colour.
- `colour_counts()`: a `collections.Counter` of the stickers by colour.
- `render()`: the coloured view as a string, with a header line naming the
  faces and three lines of stickers.
- `show(file=None)`: prints `render()` to `file`, standard output by default.

The column and row moves are:

- `rotate_up(col)` and `rotate_down(col)` turn a column (0, 1 or 2, counted from
  the left of the front face) through front, top, back and down. `rotate_up`
  moves the front stickers to the top, `rotate_down` moves them to the bottom.
  Turning column 0 or 2 also turns the left or right face.
- `rotate_left(row)` and `rotate_right(row)` turn a row (0, 1 or 2, counted from
  the top) through front, right, back and left. `rotate_right` moves the front
  stickers to the right face, `rotate_left` to the left face. Turning row 0 or
  2 also turns the top or down face.

An index outside 0 to 2 raises `ValueError`.

`ColorPiece` is an enum of the sticker colours (`YELLOW`, `GREEN`, `WHITE`,
`BLUE`, `ORANGE`, `RED`, and `NONE`); its `render()` returns the ANSI text for
one sticker.

Orange is drawn with a 24-bit ANSI colour code, so use a terminal that supports
true colour for the best view.

## What it does not do

The package does not solve a cube, scramble one, read moves from the user, or
save and load cube states. Only row and column turns are provided; there are no
turns of the front or back layers.

## Running the tests

```
pip install .[test]
pytest
```