"""
Caller-owned guess history for one round.

The engine itself is stateless; this container is what a game controller
keeps between renders. Guesses are append-only within a round and cleared
by reset() at round start. Because of that, (target, number of guesses) is
enough to key the keyboard memo.

No validation and no persistence happen here: the controller decides what
counts as a legal guess before calling append().
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

from .keyboard import KeyboardState, classify_keyboard
from .scoring import classify_guess_row
from .states import TileState


class GuessHistory:

    def __init__(self, target: str, *, budget_duplicates: bool = False):
        self.target = target
        self.budget_duplicates = budget_duplicates
        self._guesses: List[str] = []
        self._memo_key: Tuple[str, int] | None = None
        self._memo: KeyboardState | None = None

    def append(self, guess: str) -> None:
        self._guesses.append(guess)

    def reset(self, target: str | None = None) -> None:
        """Start a new round, optionally against a new target."""
        if target is not None:
            self.target = target
        self._guesses.clear()
        # the (target, length) key repeats across rounds
        self._memo = None
        self._memo_key = None

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(self._guesses)

    def __len__(self) -> int:
        return len(self._guesses)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._guesses))

    def keyboard(self) -> KeyboardState:
        key = (self.target, len(self._guesses))
        if self._memo is None or self._memo_key != key:
            self._memo = classify_keyboard(self.target, self._guesses)
            self._memo_key = key
        return self._memo

    def rows(self) -> List[List[TileState]]:
        return [
            classify_guess_row(self.target, g, budget_duplicates=self.budget_duplicates)
            for g in self._guesses
        ]
