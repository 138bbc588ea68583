"""Tests for evaluator.py - entry points and evaluation session"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from machi.core.hand import Hand, InvalidHand
from machi.core.tile import InvalidTile, TileSuit
from machi.engine.config import EvalConfig
from machi.engine.event import EventBus, EventType
from machi.engine.evaluator import Evaluator, evaluate, is_complete, parse


def record_events(bus):
    """Subscribe to every event type and collect what is emitted."""
    seen = []
    for event_type in EventType:
        bus.subscribe(event_type, seen.append)
    return seen


class TestEntryPoints:
    def test_parse(self):
        assert parse("123m") == Hand.from_string("123m")
        with pytest.raises(InvalidTile):
            parse("123q")
        with pytest.raises(InvalidHand):
            parse("11111m")

    def test_evaluate(self):
        assert [t.name for t in evaluate(parse("13m456p789s11155s"))] == ["2m"]

    def test_evaluate_uses_config(self):
        hand = parse("1122m3344p5566s7m")
        assert [t.name for t in evaluate(hand)] == ["7m"]
        assert evaluate(hand, EvalConfig(allow_seven_pairs=False)) == []
        assert [t.name for t in evaluate(hand, EvalConfig(parallel=True))] == ["7m"]

    def test_is_complete(self):
        assert is_complete(parse("11112345678999m"))
        assert not is_complete(parse("1112345678999m"))
        assert not is_complete(parse("1122m3344p5566s77m"), EvalConfig(allow_seven_pairs=False))


class TestEvaluator:
    def test_submit_emits_events(self):
        bus = EventBus()
        seen = record_events(bus)
        result = Evaluator(event_bus=bus).submit("  1112345678999m ")

        assert [e.event_type for e in seen] == [EventType.HAND_PARSED, EventType.WAITS_CALCULATED]
        assert len(result.waiting_tiles) == 9
        assert result.is_tenpai
        assert result.is_pre_win_size
        assert not result.is_random
        assert seen[1].data["waits"] == result.waits

    def test_empty_input(self):
        bus = EventBus()
        seen = record_events(bus)
        assert Evaluator(event_bus=bus).submit("   ") is None
        assert [e.event_type for e in seen] == [EventType.EMPTY_INPUT]

    def test_rejected_input(self):
        bus = EventBus()
        seen = record_events(bus)
        with pytest.raises(InvalidTile):
            Evaluator(event_bus=bus).submit("12x")
        assert [e.event_type for e in seen] == [EventType.INPUT_REJECTED]
        assert seen[0].data["text"] == "12x"

    def test_wrong_size_is_not_an_error(self):
        result = Evaluator().submit("123m")
        assert result.waits == []
        assert not result.is_pre_win_size

    def test_random_hand(self):
        bus = EventBus()
        seen = record_events(bus)
        evaluator = Evaluator(EvalConfig(seed=42, random_suits=[TileSuit.PIN]), bus)
        result = evaluator.random_hand()

        assert [e.event_type for e in seen] == [
            EventType.RANDOM_HAND, EventType.HAND_PARSED, EventType.WAITS_CALCULATED,
        ]
        assert result.is_random
        assert len(result.hand) == 13
        assert all(t.suit == TileSuit.PIN for t in result.hand)

    def test_random_hand_seeded(self):
        first = Evaluator(EvalConfig(seed=8)).random_hand()
        second = Evaluator(EvalConfig(seed=8)).random_hand()
        assert first.hand == second.hand

    def test_close(self):
        bus = EventBus()
        seen = record_events(bus)
        Evaluator(event_bus=bus).close()
        assert [e.event_type for e in seen] == [EventType.SESSION_END]


class TestConfig:
    def test_defaults(self):
        config = EvalConfig()
        assert config.allow_seven_pairs
        assert config.respect_copy_limit
        assert not config.parallel
        assert config.language == "ja"
        assert config.log_dir.endswith("logs")

    def test_bad_language(self):
        with pytest.raises(ValueError):
            EvalConfig(language="fr")

    def test_config_info(self):
        info = EvalConfig(random_suits=[TileSuit.MAN, TileSuit.SOU], seed=3).config_info()
        assert info["random_suits"] == ["m", "s"]
        assert info["seed"] == 3
