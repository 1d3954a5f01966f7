"""Command that shows a cube before and after a short sequence of moves."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from rubikcube.cube import RubiksCube


def main(argv: Sequence[str] | None = None) -> int:
    """Show a solved cube, apply four moves, and show it again."""
    parser = argparse.ArgumentParser(
        prog="rubikcube",
        description="Display a Rubik's cube before and after a few moves.",
    )
    parser.parse_args(argv)

    cube = RubiksCube()
    cube.show()
    cube.rotate_up(2)
    cube.rotate_left(2)
    cube.rotate_right(2)
    cube.rotate_down(2)
    cube.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())