from __future__ import annotations
import logging
from typing import Optional

from puzzle_core.board import Board
from puzzle_core.config import GenerateConfig
from puzzle_core.layout import Layout
from puzzle_core.rng import RandomSeed

from .events import CancelCheck, EventSink
from .garbage import GarbageGenerator
from .goal import GoalGenerator
from .moves import MoveGenerator

logger = logging.getLogger(__name__)


def generate_puzzle(
    area: Board,
    random_seed: RandomSeed,
    config: GenerateConfig,
    on_event: EventSink = None,
    cancel: CancelCheck = None,
) -> Optional[Layout]:
    """Runs goal -> moves -> garbage on one random stream.

    The goal stage is skipped when `config.place_goal` is false and the
    garbage stage when the density is zero. Returns None if move generation
    exhausts its attempts.
    """
    if config.place_goal:
        area = GoalGenerator(config.goal_size).generate_goal(area, random_seed, on_event)

    generator = MoveGenerator(
        config.push_block_count,
        config.target_push_count,
        prevent_reversals=config.prevent_reversals,
        max_iterations=config.max_iterations,
        distinct_seed_positions=config.distinct_seed_positions,
    )
    layout = generator.generate_layout(area, random_seed, on_event, cancel)
    if layout is None:
        logger.info("no layout for seed %d", random_seed.seed)
        return None

    if config.garbage_density > 0:
        GarbageGenerator(config.garbage_density, config.break_block_chance) \
            .generate_garbage(layout, random_seed, on_event)
    return layout


def blank_area(config: GenerateConfig) -> Board:
    return Board(config.rows, config.columns)
