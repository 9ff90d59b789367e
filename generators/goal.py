from __future__ import annotations
import logging
from typing import List, Tuple

from puzzle_core.board import Board
from puzzle_core.errors import NoValidPositionError
from puzzle_core.position import Position
from puzzle_core.rng import RandomSeed
from puzzle_core.tile import Tile

from .events import EventSink, emit

logger = logging.getLogger(__name__)

STAGE = "goal"


class GoalGenerator:
    """Stamps one rectangular goal at a random empty spot of an area."""

    def __init__(self, goal_size: Tuple[int, int] = (1, 1)) -> None:
        self.goal_size = goal_size

    @property
    def goal_size(self) -> Position:
        return self._goal_size

    @goal_size.setter
    def goal_size(self, value: Tuple[int, int]) -> None:
        self._goal_size = Position(max(int(value[0]), 1), max(int(value[1]), 1))

    def generate_goal(self, area: Board, random_seed: RandomSeed, on_event: EventSink = None) -> Board:
        """Returns a copy of the area with a goal inserted.

        Raises NoValidPositionError if the goal does not fit anywhere.
        """
        logger.info("[Goal Generator] Generating puzzle goals...")
        emit(on_event, STAGE, "started")
        result = area.copy()
        positions = self.find_goal_positions(result)
        if not positions:
            raise NoValidPositionError("No possible goal locations found.")
        anchor = positions[random_seed.next(0, len(positions))]
        self._insert_goal(result, anchor)
        logger.info("[Goal Generator] Goal generation complete.")
        emit(on_event, STAGE, "complete")
        return result

    def find_goal_positions(self, area: Board) -> List[Position]:
        """Top-left anchors where the whole goal rectangle is empty and in bounds."""
        rows, columns = self.goal_size
        return [
            Position(r, c)
            for r in range(area.rows)
            for c in range(area.columns)
            if self._can_add_goal(area, r, c, rows, columns)
        ]

    @staticmethod
    def _can_add_goal(area: Board, row: int, column: int, rows: int, columns: int) -> bool:
        for i in range(rows):
            for j in range(columns):
                if area.get(row + i, column + j) != Tile.NONE:
                    return False
        return True

    def _insert_goal(self, area: Board, anchor: Position) -> None:
        rows, columns = self.goal_size
        for i in range(rows):
            for j in range(columns):
                area[Position(anchor.row + i, anchor.column + j)] = Tile.GOAL


def generate_goal(area: Board, random_seed: RandomSeed, goal_size: Tuple[int, int] = (1, 1)) -> Board:
    return GoalGenerator(goal_size).generate_goal(area, random_seed)
