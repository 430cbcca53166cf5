"""
Closed sets of visual states produced by the feedback engine.

Two levels:
  - TileState : per-position state of one guess row (tile colours)
  - KeyState  : aggregate state of one keyboard letter across all guesses

Each TileState carries the single-character pattern symbol used throughout
the harness ('G', 'Y', '-'), so a row can be flattened to a string like
"--YY-" for CSV output and golden tests.
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable


class TileState(Enum):
    CORRECT = "G"   # right letter, right position
    PRESENT = "Y"   # letter appears somewhere else in the target
    ABSENT = "-"    # letter not in the target

    @property
    def symbol(self) -> str:
        return self.value


class KeyState(Enum):
    """Keyboard key state. Rendered as default / disabled / correct."""
    UNTESTED = "untested"
    ELIMINATED = "eliminated"
    CONFIRMED = "confirmed"


def to_pattern(row: Iterable[TileState]) -> str:
    """Flatten a row classification to its 'G'/'Y'/'-' string."""
    return "".join(t.symbol for t in row)
