from enum import IntFlag

__all__ = [
    "Tile",
    "has_any",
    "has_all",
    "PUSHER_BLOCKING",
    "BLOCK_BLOCKING",
    "RAYCAST_BLOCKING",
]


class Tile(IntFlag):
    """Stacked layers of a single board cell.

    STOP_BLOCK and BREAK_BLOCK never share a cell. PUSH_BLOCK may rest on GOAL.
    OUT_OF_BOUNDS is only returned by board reads outside the grid.
    """

    NONE = 0
    STOP_BLOCK = 1 << 0
    BREAK_BLOCK = 1 << 1
    PUSH_BLOCK = 1 << 2
    GOAL = 1 << 3
    BLOCK_VOID = 1 << 4
    PUSHER_VOID = 1 << 5
    VOID = BLOCK_VOID | PUSHER_VOID
    OUT_OF_BOUNDS = 1 << 6
    GARBAGE = 1 << 7
    MARKED = 1 << 8  # scratch marking used by generators
    CUSTOM1 = 1 << 9
    CUSTOM2 = 1 << 10
    CUSTOM3 = 1 << 11
    CUSTOM4 = 1 << 12
    CUSTOM5 = 1 << 13


def has_any(tile: int, flags: int) -> bool:
    return (tile & flags) != 0


def has_all(tile: int, flags: int) -> bool:
    return (tile & flags) == flags


# ---- layer masks

# cells the pusher cannot stand on
PUSHER_BLOCKING = Tile.PUSH_BLOCK | Tile.BREAK_BLOCK | Tile.STOP_BLOCK | Tile.OUT_OF_BOUNDS | Tile.PUSHER_VOID
# cells a push block cannot enter
BLOCK_BLOCKING = Tile.PUSH_BLOCK | Tile.BREAK_BLOCK | Tile.STOP_BLOCK | Tile.OUT_OF_BOUNDS | Tile.BLOCK_VOID
# cells that end a push block raycast
RAYCAST_BLOCKING = BLOCK_BLOCKING | Tile.GOAL
