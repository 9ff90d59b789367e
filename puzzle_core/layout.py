from __future__ import annotations
from typing import List

from .board import Board
from .move import Move
from .position import Position
from .render import render_board, render_tiled


class Layout:
    """
    A generated puzzle: seed, initial push block positions, tiles and moves.

    The tiles are a private copy of the board passed in. During generation the
    push block positions and moves are mutated; once returned by a generator the
    layout is treated as read-only, except for garbage decoration.
    `moves[0]` is the first move of forward play.
    """

    def __init__(self, tiles: Board, seed: int) -> None:
        self.seed = int(seed)
        self.push_block_positions: List[Position] = []
        self.tiles = tiles.copy()
        self.moves: List[Move] = []

    def __repr__(self) -> str:
        return f"Layout(seed={self.seed}, push_blocks={len(self.push_block_positions)}, moves={len(self.moves)})"

    def intersects(self, position: Position) -> bool:
        """True if the position lies on the push path of any move."""
        return any(move.intersects(position) for move in self.moves)

    def puzzle_boards(self) -> List[Board]:
        """Start board followed by the board after each forward move."""
        board = self.tiles.copy()
        result = [board]
        for move in self.moves:
            board = board.copy()
            move.apply(board)
            result.append(board)
        return result

    def move_report(self) -> str:
        boards = self.puzzle_boards()
        parts = ["Start board:\n" + render_board(boards[0], " ")]
        for i, board in enumerate(boards[1:], 1):
            parts.append(f"Move {i}:\n" + render_board(board, " "))
        return "\n\n".join(parts) + "\n"

    def tiled_move_report(self, columns: int) -> str:
        return render_tiled(self.puzzle_boards(), columns)
