from __future__ import annotations
import math
from typing import Dict, List, Sequence

from .board import Board
from .errors import UnrenderableTileError
from .parser import CHAR_TO_TILE, TOK_BREAK_BLOCK, TOK_STOP_BLOCK
from .tile import Tile

TILE_TO_CHAR: Dict[int, str] = {int(tile): ch for ch, tile in CHAR_TO_TILE.items()}
# garbage blocks render like the block they are
TILE_TO_CHAR[int(Tile.STOP_BLOCK | Tile.GARBAGE)] = TOK_STOP_BLOCK
TILE_TO_CHAR[int(Tile.BREAK_BLOCK | Tile.GARBAGE)] = TOK_BREAK_BLOCK

TILED_SPACING = 3


def tile_char(tile: int) -> str:
    ch = TILE_TO_CHAR.get(int(tile))
    if ch is None:
        raise UnrenderableTileError(f"Unhandled tile type: {Tile(int(tile))!r}")
    return ch


def render_rows(board: Board, sep: str = "") -> List[str]:
    return [sep.join(tile_char(t) for t in row) for row in board.cells.tolist()]


def render_board(board: Board, sep: str = "") -> str:
    """ASCII visualization of the board, one row per line."""
    return "\n".join(render_rows(board, sep))


def render_tiled(boards: Sequence[Board], columns: int) -> str:
    """Lays out several boards side by side, `columns` boards per band.

    The first board is headed "Start board:", the k-th one "Move k:".
    """
    if not boards:
        return ""
    columns = max(columns, 1)
    rendered = [render_rows(b, " ") for b in boards]
    width = 2 * boards[0].columns + TILED_SPACING
    bands = math.ceil(len(boards) / columns)
    out_lines: List[str] = []

    for m in range(bands):
        chunk = list(range(m * columns, min((m + 1) * columns, len(boards))))
        headers = []
        for n, k in enumerate(chunk):
            header = "Start board:" if k == 0 else f"Move {k}:"
            if n < len(chunk) - 1:
                header = header.ljust(width)
            headers.append(header)
        out_lines.append("".join(headers))

        for i in range(boards[0].rows):
            parts = [rendered[k][i] + " " for k in chunk]
            out_lines.append((" " * TILED_SPACING).join(parts))

        if m < bands - 1:
            out_lines.append("")
    return "\n".join(out_lines) + "\n"
