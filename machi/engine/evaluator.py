"""Entry points for hand evaluation and the interactive evaluation session."""

import random
from dataclasses import dataclass, field
from typing import List, Optional

from machi.core.hand import Hand
from machi.core.tile import Tile
from machi.core.wall import random_hand
from machi.engine.config import EvalConfig
from machi.engine.event import Event, EventBus, EventType
from machi.rules.agari import is_winning_hand
from machi.rules.waits import PRE_WIN_HAND_SIZE, Wait, calculate_waiting_tiles, find_waits


def parse(text: str) -> Hand:
    """Parse hand notation. Raises InvalidTile or InvalidHand."""
    return Hand.from_string(text)


def evaluate(hand: Hand, config: Optional[EvalConfig] = None) -> List[Tile]:
    """Waiting tiles of a 13-tile hand, in canonical order."""
    config = config or EvalConfig()
    return calculate_waiting_tiles(
        hand,
        allow_seven_pairs=config.allow_seven_pairs,
        respect_copy_limit=config.respect_copy_limit,
        parallel=config.parallel,
        max_workers=config.max_workers,
    )


def is_complete(hand: Hand, config: Optional[EvalConfig] = None) -> bool:
    """Whether a 14-tile hand is a winning hand."""
    config = config or EvalConfig()
    return is_winning_hand(hand, allow_seven_pairs=config.allow_seven_pairs)


@dataclass
class EvaluationResult:
    """Outcome of evaluating one hand."""
    hand: Hand
    waits: List[Wait] = field(default_factory=list)
    is_random: bool = False

    @property
    def waiting_tiles(self) -> List[Tile]:
        return [w.tile for w in self.waits]

    @property
    def is_tenpai(self) -> bool:
        return bool(self.waits)

    @property
    def is_pre_win_size(self) -> bool:
        return len(self.hand) == PRE_WIN_HAND_SIZE


class Evaluator:
    """Evaluation session: turns user input into events for the UI and logger."""

    def __init__(self, config: Optional[EvalConfig] = None,
                 event_bus: Optional[EventBus] = None):
        self.config = config or EvalConfig()
        self.event_bus = event_bus or EventBus()
        self.rng = random.Random(self.config.seed)

    def submit(self, text: str) -> Optional[EvaluationResult]:
        """Evaluate a hand typed by the user.

        Returns None for blank input. Parse errors are announced with an
        INPUT_REJECTED event and re-raised.
        """
        text = text.strip()
        if not text:
            self.event_bus.emit(Event(EventType.EMPTY_INPUT))
            return None

        try:
            hand = parse(text)
        except ValueError as e:
            self.event_bus.emit(Event(EventType.INPUT_REJECTED, {
                "text": text,
                "error": e,
            }))
            raise

        return self.evaluate_hand(hand)

    def random_hand(self) -> EvaluationResult:
        """Deal a random 13-tile hand and evaluate it."""
        hand = random_hand(PRE_WIN_HAND_SIZE, suits=self.config.random_suits, rng=self.rng)
        self.event_bus.emit(Event(EventType.RANDOM_HAND, {"hand": hand}))
        return self.evaluate_hand(hand, is_random=True)

    def evaluate_hand(self, hand: Hand, is_random: bool = False) -> EvaluationResult:
        self.event_bus.emit(Event(EventType.HAND_PARSED, {
            "hand": hand,
            "is_random": is_random,
        }))

        waits = find_waits(
            hand,
            allow_seven_pairs=self.config.allow_seven_pairs,
            respect_copy_limit=self.config.respect_copy_limit,
            parallel=self.config.parallel,
            max_workers=self.config.max_workers,
        )
        result = EvaluationResult(hand, waits, is_random)

        self.event_bus.emit(Event(EventType.WAITS_CALCULATED, {
            "hand": hand,
            "waits": waits,
            "is_random": is_random,
        }))
        return result

    def close(self):
        self.event_bus.emit(Event(EventType.SESSION_END))
