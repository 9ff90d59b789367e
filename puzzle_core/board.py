from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterator, List, Sequence

import numpy as np

from .position import Position, ZERO
from .tile import Tile

__all__ = ["Board", "RaycastHit", "raycast"]

TILE_DTYPE = np.uint16


class Board:
    """
    Fixed rows x columns grid of tiles addressed by (row, column).

    Tiles are stored as a uint16 numpy array. Reads outside the grid return
    Tile.OUT_OF_BOUNDS; writes outside the grid raise IndexError.
    """

    __slots__ = ("cells",)

    def __init__(self, rows: int, columns: int) -> None:
        if rows < 0 or columns < 0:
            raise ValueError(f"invalid board size: {rows}x{columns}")
        self.cells = np.zeros((rows, columns), dtype=TILE_DTYPE)

    @classmethod
    def from_array(cls, values: Sequence[Sequence[int]] | np.ndarray) -> Board:
        arr = np.array(values, dtype=TILE_DTYPE)
        if arr.ndim != 2:
            raise ValueError("board array must be 2D")
        if np.any(arr & int(Tile.OUT_OF_BOUNDS)):
            raise ValueError("OUT_OF_BOUNDS cannot be stored in a board")
        board = cls(0, 0)
        board.cells = arr
        return board

    def copy(self) -> Board:
        board = Board(0, 0)
        board.cells = self.cells.copy()
        return board

    # ---- shape
    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self.cells.shape[1])

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    # ---- access
    def get(self, row: int, column: int) -> Tile:
        if not self.in_bounds(row, column):
            return Tile.OUT_OF_BOUNDS
        return Tile(int(self.cells[row, column]))

    def __getitem__(self, position: Position) -> Tile:
        return self.get(position[0], position[1])

    def __setitem__(self, position: Position, tile: int) -> None:
        row, column = position[0], position[1]
        if not self.in_bounds(row, column):
            raise IndexError(f"position {tuple(position)} outside {self.rows}x{self.columns} board")
        self.cells[row, column] = int(tile)

    def positions(self) -> Iterator[Position]:
        for r in range(self.rows):
            for c in range(self.columns):
                yield Position(r, c)

    def find_positions(self, predicate: Callable[[Tile], bool]) -> List[Position]:
        """Row-major list of positions whose tile satisfies the predicate."""
        return [p for p in self.positions() if predicate(self[p])]

    def count(self, tile: int) -> int:
        """Number of cells exactly equal to the tile value."""
        return int(np.count_nonzero(self.cells == int(tile)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells.shape == other.cells.shape and bool(np.array_equal(self.cells, other.cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, columns={self.columns})"


@dataclass(frozen=True, slots=True)
class RaycastHit:
    tile: Tile
    position: Position


def raycast(board: Board, position: Position, offset: Position, blocking: int) -> RaycastHit:
    """Steps from position (exclusive) along offset until a blocking layer is met.

    OUT_OF_BOUNDS always blocks, so the ray stops at the first cell past the edge.
    """
    if tuple(offset) == ZERO:
        raise ValueError("Offset must be a non-zero vector.")
    blocking |= Tile.OUT_OF_BOUNDS
    tile = Tile.NONE
    pos = Position(position[0], position[1])
    while (tile & blocking) == 0:
        pos = pos + offset
        tile = board[pos]
    return RaycastHit(tile, pos)
