"""
Keyboard state aggregated over a whole guess history.

Given:
  - the target word
  - every guess submitted so far (in order)

Return:
  - a KeyboardState that maps any letter to exactly one KeyState.

The scan only collects two sets of evidence:
  confirmed  : letters that landed on their own position in some guess
  eliminated : letters guessed somewhere that the target does not contain
A letter that is in the target but was only guessed off-position lands in
neither set and stays UNTESTED.

Precedence (CONFIRMED > ELIMINATED > UNTESTED) is resolved at lookup time in
KeyboardState.state, never by overwriting a shared map, so a later guess can
not erase an earlier confirmation.
"""

from __future__ import annotations
from dataclasses import dataclass
from string import ascii_uppercase
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple

from .states import KeyState

# On-screen layout, top row first.
KEYBOARD_ROWS: Tuple[str, ...] = ("QWERTYUIOP", "ASDFGHJKL", "ZXCVBNM")


@dataclass(frozen=True)
class KeyboardState:
    confirmed: FrozenSet[str] = frozenset()
    eliminated: FrozenSet[str] = frozenset()

    def state(self, letter: str) -> KeyState:
        """Total lookup: unknown letters are UNTESTED."""
        if letter in self.confirmed:
            return KeyState.CONFIRMED
        if letter in self.eliminated:
            return KeyState.ELIMINATED
        return KeyState.UNTESTED

    __call__ = state

    def __getitem__(self, letter: str) -> KeyState:
        return self.state(letter)

    def as_dict(self, alphabet: Iterable[str] = ascii_uppercase) -> Dict[str, KeyState]:
        return {ch: self.state(ch) for ch in alphabet}

    def rows(self, layout: Sequence[str] = KEYBOARD_ROWS) -> List[List[Tuple[str, KeyState]]]:
        """Pair each key of `layout` with its state, row by row."""
        return [[(ch, self.state(ch)) for ch in row] for row in layout]


def classify_keyboard(target: str, guesses: Iterable[str]) -> KeyboardState:
    """
    Aggregate keyboard evidence across all `guesses` against `target`.

    Inputs are assumed pre-validated; positions past the end of the target
    are ignored rather than rejected.
    """
    confirmed = set()
    eliminated = set()

    for guess in guesses:
        for g, t in zip(guess, target):
            if g == t:
                confirmed.add(g)
            elif g not in target:
                eliminated.add(g)

    return KeyboardState(frozenset(confirmed), frozenset(eliminated))
