"""Evaluation and session configuration."""

import os
from typing import Optional, Sequence

from machi.core.tile import TileSuit

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")

LANGUAGES = ("ja", "en", "zh")


class EvalConfig:
    """Evaluation configuration."""

    def __init__(
        self,
        allow_seven_pairs: bool = True,
        respect_copy_limit: bool = True,  # Skip tiles already held four times
        parallel: bool = False,
        max_workers: Optional[int] = None,
        language: str = "ja",
        save_log: bool = False,
        log_dir: Optional[str] = None,
        random_suits: Optional[Sequence[TileSuit]] = None,  # None: one random suit
        seed: Optional[int] = None,
    ):
        if language not in LANGUAGES:
            raise ValueError(f"language must be one of {LANGUAGES}, got {language!r}")
        self.allow_seven_pairs = allow_seven_pairs
        self.respect_copy_limit = respect_copy_limit
        self.parallel = parallel
        self.max_workers = max_workers
        self.language = language
        self.save_log = save_log
        self.log_dir = log_dir or DEFAULT_LOG_DIR
        self.random_suits = tuple(random_suits) if random_suits else None
        self.seed = seed

    def config_info(self) -> dict:
        """JSON-friendly summary for the session log."""
        return {
            "allow_seven_pairs": self.allow_seven_pairs,
            "respect_copy_limit": self.respect_copy_limit,
            "parallel": self.parallel,
            "language": self.language,
            "random_suits": [s.char for s in self.random_suits] if self.random_suits else None,
            "seed": self.seed,
        }
