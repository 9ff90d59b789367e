from __future__ import annotations
import json
import os
from typing import Any, Dict, Iterable, Iterator

from .board import Board
from .layout import Layout
from .move import Move
from .position import Position
from .tile import Tile


def move_to_dict(move: Move) -> Dict[str, Any]:
    return {
        "push_block": move.push_block,
        "stop_tile": int(move.stop_tile),
        "from_position": list(move.from_position),
        "to_position": list(move.to_position),
    }


def dict_to_move(rec: Dict[str, Any]) -> Move:
    return Move(
        push_block=int(rec["push_block"]),
        stop_tile=Tile(int(rec["stop_tile"])),
        from_position=Position(*map(int, rec["from_position"])),
        to_position=Position(*map(int, rec["to_position"])),
    )


def layout_to_dict(layout: Layout) -> Dict[str, Any]:
    """Plain-data view of a layout. Key order is seed, positions, tiles, moves."""
    return {
        "seed": layout.seed,
        "push_block_positions": [list(p) for p in layout.push_block_positions],
        "tiles": layout.tiles.cells.tolist(),
        "moves": [move_to_dict(m) for m in layout.moves],
    }


def layout_from_dict(rec: Dict[str, Any]) -> Layout:
    layout = Layout(Board.from_array(rec["tiles"]), int(rec["seed"]))
    layout.push_block_positions = [Position(*map(int, p)) for p in rec["push_block_positions"]]
    layout.moves = [dict_to_move(m) for m in rec["moves"]]
    return layout


def _ensure_parent(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def save_layout_json(path: str, layout: Layout) -> None:
    _ensure_parent(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(layout_to_dict(layout), f, indent=2)


def load_layout_json(path: str) -> Layout:
    with open(path, "r", encoding="utf-8") as f:
        return layout_from_dict(json.load(f))


def write_layouts_jsonl(path: str, layouts: Iterable[Layout]) -> int:
    """Writes one layout per line and returns the number written."""
    _ensure_parent(path)
    n = 0
    with open(path, "w", encoding="utf-8") as f:
        for layout in layouts:
            f.write(json.dumps(layout_to_dict(layout)) + "\n")
            n += 1
    return n


def iterate_layouts_jsonl(path: str) -> Iterator[Layout]:
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                yield layout_from_dict(json.loads(line))
