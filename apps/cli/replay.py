# apps/cli/replay.py
"""
CLI entry point for classifying a file of recorded rounds.

This script:
  1) Loads rounds ("TARGET GUESS1 GUESS2 ..." per line) from --rounds.
  2) Classifies every guess row and the final keyboard of each round, with a
     live progress indicator.
  3) Writes:
       - CSV:  one row per round + guess/pattern columns
       - JSON: manifest with config, git commit, counts
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List

from tqdm import tqdm

from wordkeys.harness import replay_round, read_rounds
from wordkeys.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, replay every round with progress, and write outputs.
    """
    ap = argparse.ArgumentParser(description="wordkeys — replay recorded rounds")
    ap.add_argument("--rounds", required=True,
                    help="path to rounds file (target then guesses, one round per line)")
    ap.add_argument("--sample", type=int, help="replay only the first K rounds")
    ap.add_argument("--budget-duplicates", action="store_true",
                    help="cap PRESENT tiles by the target's letter counts (canonical rule)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args(argv)

    # 1) Load rounds
    try:
        rounds = read_rounds(args.rounds)
    except FileNotFoundError:
        ap.error(f"rounds file not found: {args.rounds}")

    if args.sample is not None:
        rounds = rounds[: args.sample]
    total = len(rounds)

    # 2) Progress mode
    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(rounds, ncols=80, desc="Replaying", unit="round") if mode == "bar" else rounds

    # 3) Replay with live progress; a bad round stops the run with its line content
    for idx, (target, guesses) in enumerate(iterator, 1):
        try:
            r = replay_round(target, guesses, budget_duplicates=args.budget_duplicates)
        except ValueError as e:
            ap.error(f"round {idx} ({target}): {e}")
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s")
                sys.stderr.flush()
                last_print = now

    if mode == "plain" and total:
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    max_guesses = max((len(r["guesses"]) for r in results), default=0)
    write_csv(results, str(csv_path), max_guesses=max_guesses)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "num_rounds": len(results),
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
