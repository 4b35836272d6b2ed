# apps/cli/run.py
"""
CLI entry point for running UUIDle solver simulations.

This script:
  1) Instantiates the requested solver.
  2) Plays a batch of games against seeded random targets with a live
     progress indicator.
  3) Writes:
       - CSV:  per-case results + guess/pattern history columns
       - JSON: manifest with config, git commit, win totals
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from packages.engine.identifier import generate
from packages.engine.session import MAX_ATTEMPTS
from packages.harness import run_case
from packages.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from packages.solvers import create_solver, get_solver_ids


def main(argv: list[str] | None = None):
    """
    Parse CLI args, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="UUIDle — run solver simulations")
    ap.add_argument("--solver", default="slot_mask",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--games", type=int, default=100, help="number of games to play")
    ap.add_argument("--attempts", type=int, default=MAX_ATTEMPTS,
                    help="attempt budget per game")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    solver = create_solver(args.solver)

    # Targets are drawn from the base seed so a rerun replays the same games.
    rng = random.Random(args.seed)
    targets = [generate(rng) for _ in range(args.games)]
    total = len(targets)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(targets, ncols=80, desc="Running", unit="game") if mode == "bar" else targets

    for idx, target in enumerate(iterator, 1):
        # Derive a per-game seed so runs are reproducible and independent
        per_seed = args.seed + idx * 1013904223  # LCG-ish stride to avoid collisions
        r = run_case(solver, target, max_attempts=args.attempts, seed=per_seed)
        r["solver_id"] = solver.id  # stamp id for downstream tools
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    wins = sum(1 for r in results if r["success"])
    print(f"{solver.id}: won {wins}/{total} games with {args.attempts} attempts each")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_attempts=args.attempts)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "num_cases": total,
        "wins": wins,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


if __name__ == "__main__":
    main()
