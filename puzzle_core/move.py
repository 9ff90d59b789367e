from __future__ import annotations
from dataclasses import dataclass

from .board import Board
from .position import Position
from .tile import Tile


@dataclass(frozen=True, slots=True)
class Move:
    """
    One push of a push block from `from_position` to `to_position`.

    `stop_tile` is the obstacle that stops the block: STOP_BLOCK or BREAK_BLOCK
    placed one cell past `to_position`, PUSH_BLOCK when another block does the
    stopping, or GOAL when the block comes to rest on a goal.
    """

    push_block: int
    stop_tile: Tile
    from_position: Position
    to_position: Position

    def direction(self) -> Position:
        """Unit direction of the push in forward play."""
        return (self.to_position - self.from_position).sign()

    def stop_position(self) -> Position:
        if self.stop_tile == Tile.GOAL:
            return self.to_position
        return self.to_position + self.direction()

    def push_position(self) -> Position:
        """Cell the pusher stands on to make the push."""
        return self.from_position - self.direction()

    def intersects(self, position: Position) -> bool:
        """True if the position lies on the push path (inclusive of both ends)."""
        lo = Position.min(self.from_position, self.to_position)
        hi = Position.max(self.from_position, self.to_position)
        return lo.row <= position[0] <= hi.row and lo.column <= position[1] <= hi.column

    # ---- board updates
    def apply(self, board: Board) -> None:
        """Forward play: the block moves and a break block in its way is destroyed."""
        stop = self.stop_position()
        board[stop] = board[stop] & ~Tile.BREAK_BLOCK
        board[self.to_position] = board[self.to_position] | Tile.PUSH_BLOCK
        board[self.from_position] = board[self.from_position] & ~Tile.PUSH_BLOCK

    def inverse_apply(self, board: Board) -> None:
        """Backward generation: the block returns and its stop obstacle is written."""
        stop = self.stop_position()
        board[stop] = board[stop] | self.stop_tile
        board[self.from_position] = board[self.from_position] | Tile.PUSH_BLOCK
        board[self.to_position] = board[self.to_position] & ~Tile.PUSH_BLOCK
