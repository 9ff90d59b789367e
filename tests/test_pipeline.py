from generators.pipeline import blank_area, generate_puzzle
from puzzle_core.board import Board
from puzzle_core.config import GenerateConfig
from puzzle_core.position import Position
from puzzle_core.rng import RandomSeed
from puzzle_core.tile import Tile, has_any


def _walled(cfg: GenerateConfig) -> Board:
    """Blank area with a stop block border so goals land inside it."""
    area = blank_area(cfg)
    for p in area.positions():
        if p.row in (0, area.rows - 1) or p.column in (0, area.columns - 1):
            area[p] = Tile.STOP_BLOCK
    return area


def test_generate_small_puzzle():
    cfg = GenerateConfig(rows=11, columns=11, target_push_count=8, garbage_density=0.1, seed=12345)
    events = []
    layout = generate_puzzle(_walled(cfg), RandomSeed(cfg.seed), cfg, on_event=events.append)
    assert layout is not None
    assert len(layout.moves) == 8
    assert layout.tiles.find_positions(lambda t: has_any(t, Tile.GOAL))
    assert layout.tiles.find_positions(lambda t: has_any(t, Tile.GARBAGE))

    stages = [e.stage for e in events]
    assert stages[0] == "goal"
    assert stages[-1] == "garbage"
    assert "moves" in stages
    print(layout.tiled_move_report(3))


def test_goal_and_garbage_stages_are_optional():
    cfg = GenerateConfig(rows=7, columns=7, place_goal=False, target_push_count=3)
    area = blank_area(cfg)
    area[Position(3, 3)] = Tile.GOAL
    events = []
    layout = generate_puzzle(area, RandomSeed(5), cfg, on_event=events.append)
    assert layout is not None
    assert {e.stage for e in events} == {"moves"}
    assert not layout.tiles.find_positions(lambda t: has_any(t, Tile.GARBAGE))


def test_same_seed_same_puzzle():
    cfg = GenerateConfig(rows=13, columns=13, goal_size=(1, 2), target_push_count=6, garbage_density=0.2)
    a = generate_puzzle(_walled(cfg), RandomSeed(77), cfg)
    b = generate_puzzle(_walled(cfg), RandomSeed(77), cfg)
    assert a is not None and b is not None
    assert a.tiles == b.tiles
    assert a.moves == b.moves
