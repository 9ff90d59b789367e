from typing import Dict, Iterable, List

from .board import Board
from .tile import Tile

TOK_NONE = "."
TOK_STOP_BLOCK = "#"
TOK_BREAK_BLOCK = "%"
TOK_PUSH_BLOCK = "o"
TOK_GOAL = "$"
TOK_PUSH_BLOCK_ON_GOAL = "*"
TOK_VOID = "!"
TOK_BLOCK_VOID = "+"
TOK_PUSHER_VOID = "@"

CHAR_TO_TILE: Dict[str, Tile] = {
    TOK_NONE: Tile.NONE,
    TOK_STOP_BLOCK: Tile.STOP_BLOCK,
    TOK_BREAK_BLOCK: Tile.BREAK_BLOCK,
    TOK_PUSH_BLOCK: Tile.PUSH_BLOCK,
    TOK_GOAL: Tile.GOAL,
    TOK_PUSH_BLOCK_ON_GOAL: Tile.GOAL | Tile.PUSH_BLOCK,
    TOK_VOID: Tile.VOID,
    TOK_BLOCK_VOID: Tile.BLOCK_VOID,
    TOK_PUSHER_VOID: Tile.PUSHER_VOID,
}


def parse_board_lines(lines: Iterable[str]) -> Board:
    """Builds a board from one string per row.

    Supported characters:
      '.': empty
      '#': stop block
      '%': break block
      'o': push block
      '$': goal
      '*': push block on goal
      '!': void
      '+': block void
      '@': pusher void
    Spaces inside a row are ignored so spaced renderings parse back.
    """
    rows: List[List[int]] = []
    for r, line in enumerate(lines):
        row = []
        for ch in line.replace(" ", ""):
            tile = CHAR_TO_TILE.get(ch)
            if tile is None:
                raise ValueError(f"Unknown tile character {ch!r} in row {r}")
            row.append(int(tile))
        rows.append(row)
    if not rows:
        raise ValueError("Empty board")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("All board rows must have the same length")
    return Board.from_array(rows)


def parse_board_str(board_str: str) -> Board:
    """Parses a text board; blank lines are skipped."""
    lines = [line.strip() for line in board_str.splitlines() if line.strip() != ""]
    return parse_board_lines(lines)


def parse_board_file(path: str) -> Board:
    with open(path, "r", encoding="utf-8") as f:
        return parse_board_str(f.read())
