"""
Replay harness core primitives.

- replay_round: classify one finished (or in-progress) round.
- replay_batch: classify many rounds in sequence.

These functions are UI-agnostic so they can be reused by the terminal
renderer, the batch CLI, or a notebook without changes. They normalise and
check input (see validation.py) and then hand clean words to the engine.
"""

from __future__ import annotations
from typing import Dict, Iterable, List, Sequence, Tuple

from wordkeys.engine import KeyState, classify_keyboard, row_pattern
from .validation import check_round


def replay_round(
        target: str,
        guesses: Iterable[str],
        *,
        budget_duplicates: bool = False,
) -> Dict:
    """
    Classify every guess row and the final keyboard for one round.

    Returns:
        dict with keys:
            target (str), guesses (list[str]), patterns (list[str]),
            confirmed (str), eliminated (str), untested_guessed (str)

        The three letter fields are sorted strings. `untested_guessed` holds
        letters that were guessed but ended the round UNTESTED (present in
        the target, never on their own position).

    Raises:
        ValueError if a word is not alphabetic or a guess has the wrong length.
    """
    target, guesses = check_round(target, guesses)

    patterns = [row_pattern(target, g, budget_duplicates=budget_duplicates) for g in guesses]
    kb = classify_keyboard(target, guesses)

    guessed = sorted(set("".join(guesses)))
    untested = [ch for ch in guessed if kb.state(ch) is KeyState.UNTESTED]

    return {
        "target": target,
        "guesses": guesses,
        "patterns": patterns,
        "confirmed": "".join(sorted(kb.confirmed)),
        "eliminated": "".join(sorted(kb.eliminated)),
        "untested_guessed": "".join(untested),
    }


def replay_batch(
        rounds: Sequence[Tuple[str, List[str]]],
        *,
        budget_duplicates: bool = False,
        sample: int | None = None,
) -> List[Dict]:
    """
    Replay many rounds back-to-back. If 'sample' is provided, only the first K
    rounds are used.
    """
    pool = list(rounds)
    if sample is not None:
        pool = pool[:sample]

    return [
        replay_round(target, guesses, budget_duplicates=budget_duplicates)
        for target, guesses in pool
    ]
