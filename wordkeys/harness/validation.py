"""
Input normalisation for the collaborators that feed the engine.

The engine assumes clean input and never raises. Everything that reads words
from a user or a file passes them through here first:
  - strip whitespace, uppercase
  - alphabetic A-Z only
  - every guess exactly as long as the target

Dictionary membership is deliberately not checked.
"""

from typing import Iterable, List, Tuple


def normalize_word(word: str) -> str:
    return word.strip().upper()


def check_round(target: str, guesses: Iterable[str]) -> Tuple[str, List[str]]:
    """
    Normalise a (target, guesses) pair and reject malformed words.

    Returns:
      (target, guesses) normalised to uppercase.

    Raises:
      ValueError naming the first offending word.
    """
    t = normalize_word(target)
    if not t or not t.isalpha() or not t.isascii():
        raise ValueError(f"target must be a non-empty alphabetic word; got {target!r}")

    out: List[str] = []
    for raw in guesses:
        g = normalize_word(raw)
        if not g.isalpha() or not g.isascii():
            raise ValueError(f"guess must be alphabetic; got {raw!r}")
        if len(g) != len(t):
            raise ValueError(f"guess {raw!r} has length {len(g)}; target has length {len(t)}")
        out.append(g)
    return t, out
