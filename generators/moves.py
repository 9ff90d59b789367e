from __future__ import annotations
import logging
from typing import List, Optional

from puzzle_core.board import Board, raycast
from puzzle_core.errors import NoValidPositionError
from puzzle_core.layout import Layout
from puzzle_core.move import Move
from puzzle_core.position import CARDINALS, Position
from puzzle_core.rng import RandomSeed
from puzzle_core.tile import (
    BLOCK_BLOCKING,
    PUSHER_BLOCKING,
    RAYCAST_BLOCKING,
    Tile,
    has_any,
)

from .events import CancelCheck, EventSink, emit

logger = logging.getLogger(__name__)

STAGE = "moves"


# ---- cell predicates

def pusher_can_occupy(tile: int) -> bool:
    return not has_any(tile, PUSHER_BLOCKING)


def push_block_can_occupy(tile: int) -> bool:
    return not has_any(tile, BLOCK_BLOCKING)


def can_be_stop_cell(tile: int) -> bool:
    """Empty cells can receive a stop block; push and stop blocks already stop."""
    return tile == Tile.NONE or has_any(tile, Tile.PUSH_BLOCK | Tile.STOP_BLOCK)


class MoveGenerator:
    """Generates a layout by walking push blocks backward from their goals.

    Push blocks start on goal cells and are repeatedly pulled to an earlier
    position, writing the obstacle that will stop them in forward play. Since
    every move is inverse-applied to a consistent board, replaying the reversed
    move list from the final board solves the puzzle.

    Attempts that run out of legal moves are thrown away and restarted from a
    fresh copy of the area, up to `max_iterations` times.
    """

    def __init__(
        self,
        push_block_count: int,
        target_push_count: int,
        prevent_reversals: bool = True,
        max_iterations: int = 1000,
        distinct_seed_positions: bool = False,
    ) -> None:
        self.push_block_count = max(int(push_block_count), 1)
        self.target_push_count = max(int(target_push_count), 1)
        self.prevent_reversals = prevent_reversals
        self.max_iterations = max_iterations
        # when False the same goal cell may be drawn for several blocks
        self.distinct_seed_positions = distinct_seed_positions

        self._layout: Optional[Layout] = None
        self._random_seed: Optional[RandomSeed] = None
        self._offsets: List[Position] = []
        self._push_blocks: List[int] = []

    # ---- public API
    def generate_layout(
        self,
        area: Board,
        random_seed: RandomSeed,
        on_event: EventSink = None,
        cancel: CancelCheck = None,
    ) -> Optional[Layout]:
        """Returns a new layout for the area, or None if every attempt failed.

        The area must contain at least one goal with an empty cardinal
        neighbor, otherwise NoValidPositionError is raised before any attempt.
        """
        logger.info("[Move Generator] Generating puzzle moves...")
        emit(on_event, STAGE, "started")
        self._random_seed = random_seed
        self._push_blocks = list(range(self.push_block_count))
        self._offsets = list(CARDINALS)

        seed_positions = self.find_seed_positions(area)
        if not seed_positions:
            raise NoValidPositionError("No valid goal positions found.")
        if self.distinct_seed_positions and len(seed_positions) < self.push_block_count:
            raise NoValidPositionError(
                f"Only {len(seed_positions)} goal positions for {self.push_block_count} push blocks."
            )

        try:
            for attempt in range(1, self.max_iterations + 1):
                if cancel is not None and cancel():
                    logger.info("[Move Generator] Generation cancelled after %d attempts.", attempt - 1)
                    emit(on_event, STAGE, "cancelled", attempt)
                    return None

                self._layout = Layout(area, random_seed.seed)
                self._add_push_blocks(seed_positions)

                if self._add_moves():
                    layout = self._layout
                    layout.moves.reverse()
                    logger.info("[Move Generator] Puzzle move generation complete in %d attempts.", attempt)
                    emit(on_event, STAGE, "complete", attempt)
                    return layout

                logger.debug("[Move Generator] Target moves not met. Restarting...")
                emit(on_event, STAGE, "restart", attempt)

            logger.info("[Move Generator] Failed to generate puzzle moves.")
            emit(on_event, STAGE, "failed", self.max_iterations)
            return None
        finally:
            self._layout = None

    @staticmethod
    def find_seed_positions(area: Board) -> List[Position]:
        """Goal cells with at least one empty cardinal neighbor."""
        return [
            p for p in area.find_positions(lambda t: has_any(t, Tile.GOAL))
            if any(area[p + d] == Tile.NONE for d in CARDINALS)
        ]

    # ---- attempt setup
    def _add_push_blocks(self, positions: List[Position]) -> None:
        layout = self._layout
        if self.distinct_seed_positions:
            chosen = self._random_seed.sample(positions, self.push_block_count)
        else:
            chosen = [positions[self._random_seed.next(0, len(positions))] for _ in range(self.push_block_count)]
        for position in chosen:
            layout.tiles[position] = layout.tiles[position] | Tile.PUSH_BLOCK
            layout.push_block_positions.append(position)

    # ---- move synthesis
    def _add_moves(self) -> bool:
        # every block moves at least once
        for push_block in self._random_push_blocks():
            if not self._add_move(push_block):
                return False
        for _ in range(self.push_block_count, self.target_push_count):
            if not self._add_push_block_move():
                return False
        return True

    def _add_push_block_move(self) -> bool:
        for push_block in self._random_push_blocks():
            if self._add_move(push_block):
                return True
        return False

    def _add_move(self, push_block: int) -> bool:
        layout = self._layout
        for offset in self._random_offsets():
            candidates = self._from_positions(push_block, offset)
            if not candidates:
                continue
            stop_tile = self._stop_tile(push_block, offset)
            move = Move(push_block, stop_tile, candidates[0], layout.push_block_positions[push_block])
            move.inverse_apply(layout.tiles)
            layout.push_block_positions[push_block] = move.from_position
            layout.moves.append(move)
            return True
        return False

    def _random_offsets(self) -> List[Position]:
        return self._random_seed.shuffle(self._offsets)

    def _random_push_blocks(self) -> List[int]:
        return self._random_seed.shuffle(self._push_blocks)

    # ---- legality
    def _from_positions(self, push_block: int, offset: Position) -> List[Position]:
        """Shuffled list of cells the block could have been pushed from along -offset."""
        tiles = self._layout.tiles
        to_position = self._layout.push_block_positions[push_block]
        on_goal = has_any(tiles[to_position], Tile.GOAL)

        # a resting place off the goal needs something to stop the block
        if not on_goal and not can_be_stop_cell(tiles[to_position - offset]):
            return []
        if self.prevent_reversals and self._is_opposite_last_move(push_block, offset):
            return []

        hit = raycast(tiles, to_position, offset, RAYCAST_BLOCKING)
        result = []
        position = to_position + offset
        while position != hit.position:
            if (
                pusher_can_occupy(tiles[position + offset])
                and self._side_cells_permit_push_block(position, offset)
                and (on_goal or not self._goal_in_sight(position))
            ):
                result.append(position)
            position = position + offset

        return self._random_seed.shuffle(result)

    def _side_cells_permit_push_block(self, position: Position, offset: Position) -> bool:
        """One side cell must admit the block while the other can stop it."""
        tiles = self._layout.tiles
        side1 = tiles[position + Position(offset.column, offset.row)]
        side2 = tiles[position + Position(-offset.column, -offset.row)]
        return (push_block_can_occupy(side1) and can_be_stop_cell(side2)) \
            or (push_block_can_occupy(side2) and can_be_stop_cell(side1))

    def _goal_in_sight(self, position: Position) -> bool:
        tiles = self._layout.tiles
        return any(
            has_any(raycast(tiles, position, d, RAYCAST_BLOCKING).tile, Tile.GOAL)
            for d in CARDINALS
        )

    def _is_opposite_last_move(self, push_block: int, offset: Position) -> bool:
        """True if pulling along offset reverses the block's most recent push."""
        for move in reversed(self._layout.moves):
            if move.push_block == push_block:
                return offset == move.direction()
        return False

    def _stop_tile(self, push_block: int, offset: Position) -> Tile:
        layout = self._layout
        position = layout.push_block_positions[push_block]
        if has_any(layout.tiles[position], Tile.GOAL):
            return Tile.GOAL

        behind = position - offset
        tile = layout.tiles[behind]
        if has_any(tile, Tile.PUSH_BLOCK):
            return Tile.PUSH_BLOCK
        if has_any(tile, Tile.STOP_BLOCK):
            return Tile.STOP_BLOCK
        # forward play must be able to clear blocks sitting in an earlier corridor
        if self._is_opposite_last_move(push_block, offset) or layout.intersects(behind):
            return Tile.BREAK_BLOCK
        return Tile.STOP_BLOCK


def generate_layout(
    area: Board,
    random_seed: RandomSeed,
    push_block_count: int = 1,
    target_push_count: int = 1,
    prevent_reversals: bool = True,
    max_iterations: int = 1000,
    distinct_seed_positions: bool = False,
    on_event: EventSink = None,
    cancel: CancelCheck = None,
) -> Optional[Layout]:
    generator = MoveGenerator(push_block_count, target_push_count, prevent_reversals,
                              max_iterations, distinct_seed_positions)
    return generator.generate_layout(area, random_seed, on_event, cancel)
