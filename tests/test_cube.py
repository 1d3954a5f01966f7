import io

import pytest

from rubikcube.cube import (
    HEADER,
    RED_BG,
    RESET,
    ColorPiece,
    RubiksCube,
)

MOVES = ["rotate_down", "rotate_up", "rotate_right", "rotate_left"]
INVERSE = {
    "rotate_down": "rotate_up",
    "rotate_up": "rotate_down",
    "rotate_right": "rotate_left",
    "rotate_left": "rotate_right",
}


def test_new_cube_is_solved():
    assert RubiksCube().is_solved()


def test_piece_render_uses_background_and_reset():
    assert ColorPiece.RED.render() == f"{RED_BG}  {RESET} "


def test_none_piece_renders_reset_only():
    assert ColorPiece.NONE.render() == RESET


def test_render_layout():
    lines = RubiksCube().render().splitlines()
    assert lines[0] == HEADER
    assert len(lines) == 4
    for line in lines[1:]:
        assert line.count(RESET) == 18


def test_show_writes_render():
    cube = RubiksCube()
    cube.rotate_up(1)
    buffer = io.StringIO()
    cube.show(buffer)
    assert buffer.getvalue() == cube.render()


@pytest.mark.parametrize("move", MOVES)
@pytest.mark.parametrize("layer", [0, 1, 2])
def test_single_move_unsolves(move, layer):
    cube = RubiksCube()
    getattr(cube, move)(layer)
    assert not cube.is_solved()


@pytest.mark.parametrize("move", MOVES)
@pytest.mark.parametrize("layer", [0, 1, 2])
def test_inverse_move_restores(move, layer):
    cube = RubiksCube()
    before = cube.stickers
    getattr(cube, move)(layer)
    getattr(cube, INVERSE[move])(layer)
    assert cube.stickers == before


@pytest.mark.parametrize("move", MOVES)
@pytest.mark.parametrize("layer", [0, 1, 2])
def test_four_turns_are_identity(move, layer):
    cube = RubiksCube()
    cube.rotate_up(1)
    cube.rotate_right(0)
    before = cube.stickers
    for _ in range(4):
        getattr(cube, move)(layer)
    assert cube.stickers == before


def test_colour_counts_preserved():
    cube = RubiksCube()
    for move in MOVES:
        for layer in (0, 1, 2):
            getattr(cube, move)(layer)
    counts = cube.colour_counts()
    assert set(counts) == {
        ColorPiece.RED,
        ColorPiece.BLUE,
        ColorPiece.ORANGE,
        ColorPiece.GREEN,
        ColorPiece.WHITE,
        ColorPiece.YELLOW,
    }
    assert all(n == 9 for n in counts.values())


def test_rotate_up_brings_bottom_to_front():
    cube = RubiksCube()
    cube.rotate_up(2)
    front = cube.face(0)
    assert [front[2], front[5], front[8]] == [ColorPiece.YELLOW] * 3
    assert front[0] == ColorPiece.RED


def test_rotate_right_brings_left_to_front():
    cube = RubiksCube()
    cube.rotate_right(0)
    assert cube.face(0)[:3] == (ColorPiece.GREEN,) * 3
    assert cube.face(0)[3:] == (ColorPiece.RED,) * 6


def test_sequence_from_demo_returns_to_solved():
    cube = RubiksCube()
    cube.rotate_up(2)
    cube.rotate_left(2)
    cube.rotate_right(2)
    cube.rotate_down(2)
    assert cube.is_solved()


@pytest.mark.parametrize("move", MOVES)
@pytest.mark.parametrize("layer", [-1, 3])
def test_invalid_layer_raises(move, layer):
    cube = RubiksCube()
    with pytest.raises(ValueError):
        getattr(cube, move)(layer)
    assert cube.is_solved()


def test_invalid_face_raises():
    with pytest.raises(ValueError):
        RubiksCube().face(6)