"""Tests for the text board format."""

import pytest

from puzzle_core.board import Board
from puzzle_core.errors import UnrenderableTileError
from puzzle_core.parser import parse_board_lines, parse_board_str
from puzzle_core.position import Position
from puzzle_core.render import render_board, render_tiled
from puzzle_core.tile import Tile

LINES = [
    ".#!@+*$%o",
    "o%$*+@!#.",
]

TILES = [
    [Tile.NONE, Tile.STOP_BLOCK, Tile.VOID, Tile.PUSHER_VOID, Tile.BLOCK_VOID,
     Tile.GOAL | Tile.PUSH_BLOCK, Tile.GOAL, Tile.BREAK_BLOCK, Tile.PUSH_BLOCK],
    [Tile.PUSH_BLOCK, Tile.BREAK_BLOCK, Tile.GOAL, Tile.GOAL | Tile.PUSH_BLOCK,
     Tile.BLOCK_VOID, Tile.PUSHER_VOID, Tile.VOID, Tile.STOP_BLOCK, Tile.NONE],
]


def test_lines_to_tiles():
    expected = Board.from_array([[int(t) for t in row] for row in TILES])
    assert parse_board_lines(LINES) == expected


def test_tiles_to_string():
    board = Board.from_array([[int(t) for t in row] for row in TILES])
    assert render_board(board).splitlines() == LINES
    spaced = render_board(board, " ")
    assert spaced.splitlines()[0] == ". # ! @ + * $ % o"
    assert parse_board_str(spaced) == board


def test_garbage_renders_as_its_block():
    b = Board(1, 2)
    b[Position(0, 0)] = Tile.STOP_BLOCK | Tile.GARBAGE
    b[Position(0, 1)] = Tile.BREAK_BLOCK | Tile.GARBAGE
    assert render_board(b) == "#%"


def test_unhandled_composite_raises():
    b = Board(1, 1)
    b[Position(0, 0)] = Tile.MARKED
    with pytest.raises(UnrenderableTileError):
        render_board(b)


def test_parse_errors():
    with pytest.raises(ValueError):
        parse_board_str("")
    with pytest.raises(ValueError):
        parse_board_str("..\n...")
    with pytest.raises(ValueError):
        parse_board_str("..x")


def test_tiled_layout_headers():
    boards = [Board(2, 2) for _ in range(4)]
    text = render_tiled(boards, 3)
    lines = text.splitlines()
    assert lines[0].startswith("Start board:")
    assert "Move 1:" in lines[0] and "Move 2:" in lines[0]
    assert lines[1] == ". .    . .    . . "
    # second band holds the fourth board
    assert lines[4] == "Move 3:"
    assert render_tiled([], 3) == ""
