# apps/cli/show.py
"""
Render one round to the terminal: a tile row per guess, then the keyboard.

Example:
    python -m apps.cli.show --target CRANE TRAIN CRANE
    python -m apps.cli.show --target CRANE SHEEP --json

Tile colours:   green = correct, yellow = present elsewhere, grey = absent
Key colours:    green = confirmed, dark = eliminated, plain = untested
"""

from __future__ import annotations

import argparse
import json
from typing import List

from wordkeys.engine import (
    KEYBOARD_ROWS, KeyState, TileState, classify_guess_row, classify_keyboard, to_pattern,
)
from wordkeys.harness.validation import check_round

# ANSI colour codes
GREEN = "\033[42;97m"
YELLOW = "\033[43;30m"
GREY = "\033[100;97m"
DARK = "\033[90m"
BOLD = "\033[1m"
RESET = "\033[0m"

TILE_COLORS = {
    TileState.CORRECT: GREEN,
    TileState.PRESENT: YELLOW,
    TileState.ABSENT: GREY,
}

KEY_COLORS = {
    KeyState.UNTESTED: BOLD,
    KeyState.ELIMINATED: DARK,
    KeyState.CONFIRMED: GREEN,
}


def _paint(text: str, color: str) -> str:
    return f"{color}{text}{RESET}"


def render_rows(target: str, guesses: List[str], *, color: bool = True,
                budget_duplicates: bool = False) -> List[str]:
    """One line per guess. Without colour, the pattern is appended instead."""
    lines = []
    for g in guesses:
        row = classify_guess_row(target, g, budget_duplicates=budget_duplicates)
        if color:
            lines.append("".join(_paint(f" {ch} ", TILE_COLORS[t]) for ch, t in zip(g, row)))
        else:
            lines.append(f"{' '.join(g)}   {to_pattern(row)}")
    return lines


def render_keyboard(target: str, guesses: List[str], *, color: bool = True) -> List[str]:
    """
    Three QWERTY lines. Without colour, eliminated keys print as '.' and
    confirmed keys are bracketed.
    """
    kb = classify_keyboard(target, guesses)
    lines = []
    for indent, row in enumerate(kb.rows(KEYBOARD_ROWS)):
        cells = []
        for ch, state in row:
            if color:
                cells.append(_paint(ch, KEY_COLORS[state]))
            elif state is KeyState.CONFIRMED:
                cells.append(f"[{ch}]")
            elif state is KeyState.ELIMINATED:
                cells.append(" . ")
            else:
                cells.append(f" {ch} ")
        sep = " " if color else ""
        lines.append(" " * indent + sep.join(cells))
    return lines


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordkeys — show tile rows and keyboard state")
    ap.add_argument("--target", required=True, help="target word for this round")
    ap.add_argument("guesses", nargs="*", help="guesses in the order they were submitted")
    ap.add_argument("--budget-duplicates", action="store_true",
                    help="cap PRESENT tiles by the target's letter counts (canonical rule)")
    ap.add_argument("--json", action="store_true", help="print machine-readable JSON instead")
    ap.add_argument("--no-color", action="store_true", help="plain text output")
    args = ap.parse_args(argv)

    try:
        target, guesses = check_round(args.target, args.guesses)
    except ValueError as e:
        ap.error(str(e))

    if args.json:
        kb = classify_keyboard(target, guesses)
        payload = {
            "target": target,
            "rows": [
                {"guess": g,
                 "tiles": [t.name.lower() for t in
                           classify_guess_row(target, g, budget_duplicates=args.budget_duplicates)]}
                for g in guesses
            ],
            "keyboard": {ch: st.value for ch, st in kb.as_dict().items()},
        }
        print(json.dumps(payload, indent=2))
        return 0

    color = not args.no_color
    for line in render_rows(target, guesses, color=color, budget_duplicates=args.budget_duplicates):
        print(line)
    if guesses:
        print()
    for line in render_keyboard(target, guesses, color=color):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
