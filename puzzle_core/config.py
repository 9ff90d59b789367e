from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional, Tuple

import yaml


@dataclass
class GenerateConfig:
    """Parameters for one goal -> moves -> garbage generation run."""

    rows: int = 9
    columns: int = 9
    goal_size: Tuple[int, int] = (1, 1)
    place_goal: bool = True
    push_block_count: int = 1
    target_push_count: int = 8
    prevent_reversals: bool = True
    max_iterations: int = 1000
    distinct_seed_positions: bool = False
    garbage_density: float = 0.0
    break_block_chance: float = 0.5
    seed: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GenerateConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"unknown config keys: {sorted(unknown)}")
        kwargs = dict(data)
        if "goal_size" in kwargs:
            kwargs["goal_size"] = tuple(int(x) for x in kwargs["goal_size"])
        return cls(**kwargs)


def load_config(path: str, section: Optional[str] = "generate") -> GenerateConfig:
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if section is not None:
        cfg = cfg.get(section, {})
    return GenerateConfig.from_dict(cfg)
