# src/wrapsnake/simulate.py
from __future__ import annotations
import argparse
import csv
import os
from dataclasses import replace
from typing import Tuple

import numpy as np  # type: ignore

from .config import WIDTH, HEIGHT, CELL_SIZE, CFG, Config, DIRECTIONS
from .engine import SnakeEngine
from .host import FrameDriver, ManualClock


# --------------------------
# One headless game
# --------------------------
def run_game(
    cfg: Config,
    width: int = WIDTH,
    height: int = HEIGHT,
    cell_size: int = CELL_SIZE,
    fps: int = 60,
    turn_prob: float = 0.05,
    max_frames: int = 20_000,
) -> Tuple[int, int, int, int]:
    """
    Play one game with a fake clock ticking at a fixed frame rate.
    Each frame the driver turns to a random direction with probability
    turn_prob. The same cfg.seed always replays the same game.

    Returns:
        frames: frames delivered to the engine
        steps:  steps the engine took
        score:  final score
        length: final snake length
    """
    rng = np.random.default_rng(cfg.seed)
    engine = SnakeEngine(cfg, rng=rng)
    engine.initialize(width, height, cell_size)

    clock = ManualClock()
    driver = FrameDriver(engine, now=clock)
    driver.start()

    frame_dt = 1.0 / fps
    while driver.frames < max_frames:
        if rng.random() < turn_prob:
            engine.set_direction(DIRECTIONS[int(rng.integers(len(DIRECTIONS)))])
        clock.tick(frame_dt)
        if not driver.tick():
            break

    return driver.frames, engine.steps, engine.score, len(engine.snake)


# --------------------------
# Main
# --------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(description="Run headless snake games and log them to CSV")
    parser.add_argument("--games", type=int, default=20)
    parser.add_argument("--seed", type=int, default=0, help="seed of the first game; game i uses seed+i")
    parser.add_argument("--width", type=int, default=WIDTH)
    parser.add_argument("--height", type=int, default=HEIGHT)
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE)
    parser.add_argument("--fps", type=int, default=60, help="simulated frame rate")
    parser.add_argument(
        "--turn-prob",
        type=float,
        default=0.05,
        help="chance per frame of steering to a random direction",
    )
    parser.add_argument("--max-frames", type=int, default=20_000)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    args = parser.parse_args(argv)

    if args.fps <= 0:
        parser.error("--fps must be positive")
    if not 0.0 <= args.turn_prob <= 1.0:
        parser.error("--turn-prob must be in [0, 1]")

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"sim_seed{args.seed}.csv")

    print(f"[SIM] Running {args.games} game(s) on {args.width}x{args.height} @ {args.fps} fps")
    print("game,frames,steps,score,length")

    rows = [("game", "frames", "steps", "score", "length")]
    for game in range(1, args.games + 1):
        cfg = replace(CFG, seed=args.seed + game - 1)
        frames, steps, score, length = run_game(
            cfg,
            width=args.width,
            height=args.height,
            cell_size=args.cell_size,
            fps=args.fps,
            turn_prob=args.turn_prob,
            max_frames=args.max_frames,
        )
        print(f"{game},{frames},{steps},{score},{length}")
        rows.append((game, frames, steps, score, length))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    print(f"\n[SIM] Saved results → {out_csv}")
    return out_csv


if __name__ == "__main__":
    main()
