from .session import Game, GameState, DEFAULT_OPENER, WORDLE_MAX_TURNS
from .core import run_case, run_batch
from .io import write_csv, write_manifest, timestamp_id

__all__ = [
    "Game", "GameState", "DEFAULT_OPENER", "WORDLE_MAX_TURNS",
    "run_case", "run_batch", "write_csv", "write_manifest", "timestamp_id",
]
