"""
Row classification (tile feedback) for a single (target, guess) pair.

Conventions:
  - CORRECT / 'G' : letter in the correct position
  - PRESENT / 'Y' : letter appears in the target at some other position
  - ABSENT  / '-' : letter not in the target

Default rule (simplified, no duplicate budgeting):
  every occurrence of a letter that exists anywhere in the target is
  independently PRESENT unless it matches its exact position. A guess with
  repeated letters against a single-occurrence target can therefore mark
  several tiles PRESENT.

Opt-in rule (budget_duplicates=True, canonical two-pass):
  1) First pass marks all CORRECT tiles and counts the unmatched target
     letters.
  2) Second pass marks PRESENT only while the letter still has remaining
     count.

Both rules are position-local to this guess: no other guess is consulted and
keyboard state is not touched. Positions beyond the target length produce no
classification (the row is as long as the shorter of the two words).
"""

from __future__ import annotations
from collections import Counter
from typing import List

from .states import TileState, to_pattern


def classify_guess_row(target: str, guess: str, *,
                       budget_duplicates: bool = False) -> List[TileState]:
    """
    Classify every position of `guess` against `target`.

    Inputs are used as given; callers normalise case and length first.

    Examples:
      classify_guess_row("CRANE", "TRAIN") -> [ABSENT, CORRECT, CORRECT, ABSENT, PRESENT]
    """
    if budget_duplicates:
        return _classify_budgeted(target, guess)

    row: List[TileState] = []
    for g, t in zip(guess, target):
        if g == t:
            row.append(TileState.CORRECT)
        elif g in target:
            row.append(TileState.PRESENT)
        else:
            row.append(TileState.ABSENT)
    return row


def _classify_budgeted(target: str, guess: str) -> List[TileState]:
    n = min(len(target), len(guess))
    row = [TileState.ABSENT] * n

    # Pass 1: greens, and leftover counts from the target
    remaining: Counter[str] = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            row[i] = TileState.CORRECT
        else:
            remaining[t] += 1

    # Pass 2: yellows capped by what the target still has to give
    for i in range(n):
        if row[i] is TileState.CORRECT:
            continue
        g = guess[i]
        if remaining[g] > 0:
            row[i] = TileState.PRESENT
            remaining[g] -= 1

    return row


def row_pattern(target: str, guess: str, *, budget_duplicates: bool = False) -> str:
    """
    Row classification as a 'G'/'Y'/'-' string.

      row_pattern("CRANE", "SHEEP") -> "--YY-"
      row_pattern("CRANE", "SHEEP", budget_duplicates=True) -> "--Y--"
    """
    return to_pattern(classify_guess_row(target, guess, budget_duplicates=budget_duplicates))
