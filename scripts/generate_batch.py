"""Generate layouts for a range of seeds and write them to JSONL.

Each line is the plain-data layout record from puzzle_core.io. Seeds whose
move search runs out of attempts are counted and skipped.
"""
from __future__ import annotations
import argparse
from dataclasses import replace
from multiprocessing import Pool, cpu_count
from typing import Optional, Tuple

from tqdm import tqdm

from puzzle_core.config import GenerateConfig, load_config
from puzzle_core.io import layout_from_dict, layout_to_dict, write_layouts_jsonl
from puzzle_core.rng import RandomSeed
from generators.pipeline import blank_area, generate_puzzle


def _generate_one(args_tuple: Tuple[GenerateConfig, int]) -> Optional[dict]:
    cfg, seed = args_tuple
    layout = generate_puzzle(blank_area(cfg), RandomSeed(seed), cfg)
    if layout is None:
        return None
    return layout_to_dict(layout)


def main():
    p = argparse.ArgumentParser()
    p.add_argument("--config", type=str, default="configs/generate.yaml")
    p.add_argument("--out", required=True, help="output JSONL file")
    p.add_argument("--start_seed", type=int, default=0)
    p.add_argument("--count", type=int, default=100, help="how many seeds to try")
    p.add_argument("--jobs", type=int, default=1, help="processes (0→cpu_count)")
    args = p.parse_args()

    cfg = load_config(args.config)
    payload = [(replace(cfg, seed=s), s) for s in range(args.start_seed, args.start_seed + args.count)]
    jobs = args.jobs or cpu_count()

    if jobs == 1:
        records = [_generate_one(t) for t in tqdm(payload, desc="Generating layouts", unit="seed")]
    else:
        with Pool(processes=jobs) as pool:
            records = list(tqdm(pool.imap(_generate_one, payload), total=len(payload), desc="Generating layouts", unit="seed"))

    layouts = [layout_from_dict(r) for r in records if r is not None]
    n = write_layouts_jsonl(args.out, layouts)
    print(f"wrote {n} layouts → {args.out}; failed={len(records) - n}; jobs={jobs}")


if __name__ == "__main__":
    main()
