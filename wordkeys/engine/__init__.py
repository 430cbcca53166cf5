from .states import KeyState, TileState, to_pattern
from .scoring import classify_guess_row, row_pattern
from .keyboard import KEYBOARD_ROWS, KeyboardState, classify_keyboard
from .history import GuessHistory

__all__ = [
    "KeyState", "TileState", "to_pattern",
    "classify_guess_row", "row_pattern",
    "KEYBOARD_ROWS", "KeyboardState", "classify_keyboard",
    "GuessHistory",
]
