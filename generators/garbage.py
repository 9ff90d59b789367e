from __future__ import annotations
import logging
import math
from typing import List

from puzzle_core.board import Board
from puzzle_core.layout import Layout
from puzzle_core.position import Position
from puzzle_core.rng import RandomSeed
from puzzle_core.tile import Tile

from .events import EventSink, emit

logger = logging.getLogger(__name__)

STAGE = "garbage"


class GarbageGenerator:
    """Scatters red-herring blocks over cells no move ever uses.

    Cells on a push path, and the push and stop cells of every move, are kept
    clear, so the layout stays solvable by its recorded moves.
    """

    def __init__(self, target_density: float, break_block_chance: float) -> None:
        self.target_density = target_density
        self.break_block_chance = break_block_chance

    def generate_garbage(self, layout: Layout, random_seed: RandomSeed, on_event: EventSink = None) -> None:
        """Adds garbage blocks to the layout tiles in place."""
        logger.info("[Garbage Generator] Generating garbage blocks...")
        emit(on_event, STAGE, "started")
        positions = self.find_open_positions(layout)
        count = min(self.target_garbage_blocks(len(positions)), len(positions))
        random_seed.shuffle(positions)

        for position in positions[:count]:
            layout.tiles[position] = layout.tiles[position] | self._random_block(random_seed)

        logger.info("[Garbage Generator] Garbage block generation complete: %d blocks.", count)
        emit(on_event, STAGE, "complete")

    def target_garbage_blocks(self, open_area: int) -> int:
        """Blocks needed to meet or exceed the target density."""
        return max(math.ceil(self.target_density * open_area), 0)

    @staticmethod
    def marked_tiles(layout: Layout) -> Board:
        """Copy of the layout tiles with every cell used by a move flagged MARKED."""
        tiles = layout.tiles.copy()

        def mark(position: Position) -> None:
            if tiles.in_bounds(*position):
                tiles[position] = tiles[position] | Tile.MARKED

        for move in layout.moves:
            mark(move.push_position())
            mark(move.stop_position())
            lo = Position.min(move.from_position, move.to_position)
            hi = Position.max(move.from_position, move.to_position)
            for r in range(lo.row, hi.row + 1):
                for c in range(lo.column, hi.column + 1):
                    mark(Position(r, c))
        return tiles

    def find_open_positions(self, layout: Layout) -> List[Position]:
        """Empty cells not used by any move, in row-major order."""
        return self.marked_tiles(layout).find_positions(lambda t: t == Tile.NONE)

    def _random_block(self, random_seed: RandomSeed) -> Tile:
        if random_seed.chance_satisfied(self.break_block_chance):
            return Tile.BREAK_BLOCK | Tile.GARBAGE
        return Tile.STOP_BLOCK | Tile.GARBAGE


def generate_garbage(layout: Layout, random_seed: RandomSeed, target_density: float = 0.1,
                     break_block_chance: float = 0.5, on_event: EventSink = None) -> None:
    GarbageGenerator(target_density, break_block_chance).generate_garbage(layout, random_seed, on_event)
