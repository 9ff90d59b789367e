from __future__ import annotations
from typing import NamedTuple


def _sign(x: int) -> int:
    return (x > 0) - (x < 0)


class Position(NamedTuple):
    """Integer (row, column) vector. Arithmetic is componentwise."""

    row: int
    column: int

    def __add__(self, other: Position) -> Position:  # type: ignore[override]
        return Position(self.row + other[0], self.column + other[1])

    def __sub__(self, other: Position) -> Position:
        return Position(self.row - other[0], self.column - other[1])

    def __neg__(self) -> Position:
        return Position(-self.row, -self.column)

    def sign(self) -> Position:
        return Position(_sign(self.row), _sign(self.column))

    @staticmethod
    def min(a: Position, b: Position) -> Position:
        return Position(min(a.row, b.row), min(a.column, b.column))

    @staticmethod
    def max(a: Position, b: Position) -> Position:
        return Position(max(a.row, b.row), max(a.column, b.column))


ZERO = Position(0, 0)

# right, left, down, up
CARDINALS = (Position(0, 1), Position(0, -1), Position(1, 0), Position(-1, 0))
