"""A 3x3 Rubik's cube with layer rotations and ANSI colour rendering."""

from __future__ import annotations

import sys
from collections import Counter
from enum import Enum
from typing import TextIO

YELLOW_BG = "\x1b[43m"
ORANGE_BG = "\x1b[48;2;255;165;0m"  # 24-bit colour, there is no basic orange
WHITE_BG = "\x1b[47m"
BLUE_BG = "\x1b[44m"
RED_BG = "\x1b[41m"
GREEN_BG = "\x1b[42m"
RESET = "\x1b[0m"

HEADER = "  FRONT      RIGHT      BACK       LEFT        TOP       DOWN"

FRONT, RIGHT, BACK, LEFT, TOP, DOWN = range(6)
FACE_NAMES = ("FRONT", "RIGHT", "BACK", "LEFT", "TOP", "DOWN")

# new_face[i] = old_face[perm[i]]
_TURN_CCW = (2, 5, 8, 1, 4, 7, 0, 3, 6)
_TURN_CW = (6, 3, 0, 7, 4, 1, 8, 5, 2)


class ColorPiece(Enum):
    """Colour of a single sticker."""

    YELLOW = YELLOW_BG
    GREEN = GREEN_BG
    WHITE = WHITE_BG
    BLUE = BLUE_BG
    ORANGE = ORANGE_BG
    RED = RED_BG
    NONE = ""

    def render(self) -> str:
        """Return the terminal representation of this sticker."""
        if self is ColorPiece.NONE:
            return RESET
        return f"{self.value}  {RESET} "


_SOLVED_FACES = (
    ColorPiece.RED,
    ColorPiece.BLUE,
    ColorPiece.ORANGE,
    ColorPiece.GREEN,
    ColorPiece.WHITE,
    ColorPiece.YELLOW,
)


def _check_layer(index: int, what: str) -> None:
    if index not in (0, 1, 2):
        raise ValueError(f"{what} must be 0, 1 or 2, got {index!r}")


class RubiksCube:
    """A cube stored as 54 stickers, nine per face in row-major order.

    Faces are laid out as front, right, back, left, top, down.
    """

    def __init__(self) -> None:
        self._stickers: list[ColorPiece] = [
            colour for colour in _SOLVED_FACES for _ in range(9)
        ]

    @property
    def stickers(self) -> tuple[ColorPiece, ...]:
        """All 54 stickers, face by face."""
        return tuple(self._stickers)

    def face(self, face: int) -> tuple[ColorPiece, ...]:
        """The nine stickers of one face."""
        if face not in range(6):
            raise ValueError(f"face must be in 0..5, got {face!r}")
        return tuple(self._stickers[face * 9 : face * 9 + 9])

    def is_solved(self) -> bool:
        """True when every face shows a single colour."""
        return all(len(set(self.face(face))) == 1 for face in range(6))

    def colour_counts(self) -> Counter:
        """How many stickers of each colour the cube holds."""
        return Counter(self._stickers)

    def render(self) -> str:
        """Return all six faces side by side, as printed by show()."""
        lines = [HEADER]
        for row in range(3):
            parts = []
            for face in range(6):
                start = face * 9 + row * 3
                parts.append(
                    "".join(p.render() for p in self._stickers[start : start + 3])
                )
                parts.append("  ")
            lines.append("".join(parts))
        return "\n".join(lines) + "\n"

    def show(self, file: TextIO | None = None) -> None:
        """Print the cube to *file*, standard output by default."""
        print(self.render(), end="", file=file if file is not None else sys.stdout)

    # -- moves -------------------------------------------------------------

    def _column(self, face: int, col: int) -> list[int]:
        return [face * 9 + col + 3 * k for k in range(3)]

    def _row(self, face: int, row: int) -> list[int]:
        return [face * 9 + row * 3 + k for k in range(3)]

    def _cycle(self, strips: list[list[int]]) -> None:
        """Each strip receives the stickers of the strip after it."""
        old = [[self._stickers[i] for i in strip] for strip in strips]
        for n, strip in enumerate(strips):
            source = old[(n + 1) % len(strips)]
            for index, colour in zip(strip, source):
                self._stickers[index] = colour

    def _turn_face(self, face: int, perm: tuple[int, ...]) -> None:
        old = self.face(face)
        self._stickers[face * 9 : face * 9 + 9] = [old[p] for p in perm]

    def rotate_down(self, col: int) -> None:
        """Turn a column so the front stickers move to the bottom."""
        _check_layer(col, "col")
        self._cycle([self._column(face, col) for face in (FRONT, TOP, BACK, DOWN)])
        if col == 2:
            self._turn_face(RIGHT, _TURN_CCW)
        elif col == 0:
            self._turn_face(LEFT, _TURN_CW)

    def rotate_up(self, col: int) -> None:
        """Turn a column so the front stickers move to the top."""
        _check_layer(col, "col")
        self._cycle([self._column(face, col) for face in (FRONT, DOWN, BACK, TOP)])
        if col == 2:
            self._turn_face(RIGHT, _TURN_CW)
        elif col == 0:
            self._turn_face(LEFT, _TURN_CCW)

    def rotate_right(self, row: int) -> None:
        """Turn a row so the front stickers move to the right face."""
        _check_layer(row, "row")
        self._cycle([self._row(face, row) for face in (FRONT, LEFT, BACK, RIGHT)])
        if row == 0:
            self._turn_face(TOP, _TURN_CCW)
        elif row == 2:
            self._turn_face(DOWN, _TURN_CW)

    def rotate_left(self, row: int) -> None:
        """Turn a row so the front stickers move to the left face."""
        _check_layer(row, "row")
        self._cycle([self._row(face, row) for face in (FRONT, RIGHT, BACK, LEFT)])
        if row == 0:
            self._turn_face(TOP, _TURN_CW)
        elif row == 2:
            self._turn_face(DOWN, _TURN_CCW)