from __future__ import annotations
import argparse
import logging

from puzzle_core.config import load_config
from puzzle_core.io import save_layout_json
from puzzle_core.parser import parse_board_file
from puzzle_core.rng import RandomSeed
from generators.pipeline import blank_area, generate_puzzle

"""
Generate one puzzle layout and print its move report.

Usage:
  python -m scripts.generate_layout --config configs/generate.yaml --seed 7 --out out/layout.json
  python -m scripts.generate_layout --area my_area.txt --no_goal --pushes 12
"""


def main():
    p = argparse.ArgumentParser(description="Reverse-generate a push block puzzle")
    p.add_argument("--config", type=str, default="configs/generate.yaml")
    p.add_argument("--area", type=str, default=None, help="text board to start from (default: blank area)")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--blocks", type=int, default=None, help="number of push blocks")
    p.add_argument("--pushes", type=int, default=None, help="target number of moves")
    p.add_argument("--no_goal", action="store_true", help="use the goals already in --area")
    p.add_argument("--columns", type=int, default=3, help="boards per row in the report")
    p.add_argument("--out", type=str, default=None, help="write the layout as JSON")
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(levelname)s %(message)s")

    cfg = load_config(args.config)
    if args.seed is not None:
        cfg.seed = args.seed
    if args.blocks is not None:
        cfg.push_block_count = args.blocks
    if args.pushes is not None:
        cfg.target_push_count = args.pushes
    if args.no_goal:
        cfg.place_goal = False

    area = parse_board_file(args.area) if args.area else blank_area(cfg)
    seed = RandomSeed(cfg.seed)
    layout = generate_puzzle(area, seed, cfg)
    if layout is None:
        print(f"no layout found for seed {seed.seed} after {cfg.max_iterations} attempts")
        return

    print(f"seed={layout.seed} blocks={len(layout.push_block_positions)} moves={len(layout.moves)}")
    print(layout.tiled_move_report(args.columns))
    if args.out:
        save_layout_json(args.out, layout)
        print(f"written → {args.out}")


if __name__ == "__main__":
    main()
