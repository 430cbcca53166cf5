"""
I/O utilities for replay runs.

Responsibilities:
- read_rounds:   parse a rounds file ("TARGET GUESS1 GUESS2 ..." per line).
- write_csv:     flatten per-round results into a tidy CSV (one row per round).
- write_manifest:dump a JSON manifest with config and metadata.
- timestamp_id:  stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Notes:
- Patterns are prefixed with an apostrophe to keep Excel from interpreting
  strings like "-GYY-" as formulas (which would display as #NAME?).
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import csv
import json
import subprocess
import datetime as dt

from .validation import normalize_word


def _excel_safe_pattern(patt: str) -> str:
    """
    Prefix with an apostrophe so spreadsheet apps treat it as text.
    Example: "-GYY-" -> "'-GYY-"
    """
    return "'" + patt if patt else patt


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_rounds(path: Path | str) -> List[Tuple[str, List[str]]]:
    """
    Load rounds from a whitespace-separated text file.

    Format:
      CRANE TRAIN CRANE     # target first, then guesses in order
      # comment lines and blank lines are skipped

    A target with no guesses is allowed (an unplayed round). Words are
    normalised to uppercase; length/alphabet checks happen in the harness.

    Raises:
      FileNotFoundError if the file is missing.
    """
    rounds: List[Tuple[str, List[str]]] = []
    for line in read_lines(path):
        body = line.split("#", 1)[0].strip()
        if not body:
            continue
        words = [normalize_word(w) for w in body.split()]
        rounds.append((words[0], words[1:]))
    return rounds


def write_csv(results: List[Dict], path: str, max_guesses: int) -> str:
    """
    Serialize a batch of replay results to CSV.

    Schema (columns):
      target, num_guesses, confirmed, eliminated, untested_guessed,
      guess_1, patt_1, ..., guess_max_guesses, patt_max_guesses

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    fields = ["target", "num_guesses", "confirmed", "eliminated", "untested_guessed"]
    for i in range(1, max_guesses + 1):
        fields += [f"guess_{i}", f"patt_{i}"]

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fields)
        w.writeheader()

        for r in results:
            row = {
                "target": r["target"],
                "num_guesses": len(r["guesses"]),
                "confirmed": r["confirmed"],
                "eliminated": r["eliminated"],
                "untested_guessed": r["untested_guessed"],
            }

            # Expand guesses into fixed columns (Excel-safe patterns)
            pairs = list(zip(r["guesses"], r["patterns"]))
            for i in range(1, max_guesses + 1):
                if i <= len(pairs):
                    g, patt = pairs[i - 1]
                    row[f"guess_{i}"] = g
                    row[f"patt_{i}"] = _excel_safe_pattern(patt)
                else:
                    row[f"guess_{i}"] = ""
                    row[f"patt_{i}"] = ""

            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (rounds path, outdir, budget_duplicates)
      - num_rounds
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
