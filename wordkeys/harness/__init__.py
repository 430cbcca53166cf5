from .core import replay_round, replay_batch
from .io import read_rounds, write_csv, write_manifest
from .validation import check_round, normalize_word

__all__ = [
    "replay_round", "replay_batch",
    "read_rounds", "write_csv", "write_manifest",
    "check_round", "normalize_word",
]
