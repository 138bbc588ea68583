"""Tests for session_logger.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json

import pytest

from machi.engine.config import EvalConfig
from machi.engine.event import EventBus
from machi.engine.evaluator import Evaluator
from machi.engine.session_logger import SessionLogger


def make_session(log_dir):
    config = EvalConfig(log_dir=str(log_dir), seed=1)
    bus = EventBus()
    logger = SessionLogger(config.log_dir, config.config_info())
    logger.subscribe_events(bus)
    return Evaluator(config, bus), logger


class TestSessionLogger:
    def test_records_evaluations(self, tmp_path):
        evaluator, logger = make_session(tmp_path)
        evaluator.submit("1122334455667m")

        assert len(logger.entries) == 1
        entry = logger.entries[0]
        assert entry["kind"] == "evaluation"
        assert entry["hand"] == "1122334455667m"
        assert entry["tile_count"] == 13
        assert {
            "tile": "7m",
            "shapes": ["seven_pairs", "standard"],
            "decompositions": ["11m 234m 234m 567m 567m", "44m 123m 123m 567m 567m",
                               "77m 123m 123m 456m 456m"],
        } in entry["waits"]

    def test_records_rejections(self, tmp_path):
        evaluator, logger = make_session(tmp_path)
        with pytest.raises(ValueError):
            evaluator.submit("99999p")
        assert logger.entries[0]["kind"] == "rejected"
        assert logger.entries[0]["text"] == "99999p"

    def test_empty_input_not_logged(self, tmp_path):
        evaluator, logger = make_session(tmp_path)
        evaluator.submit("")
        assert logger.entries == []

    def test_save(self, tmp_path):
        log_dir = tmp_path / "logs"
        evaluator, logger = make_session(log_dir)
        evaluator.random_hand()
        path = logger.save()

        assert os.path.dirname(path) == str(log_dir)
        assert os.path.basename(path) == f"session_{logger.session_id}.json"
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        assert data["session_id"] == logger.session_id
        assert data["config"]["seed"] == 1
        assert data["evaluations"][0]["is_random"] is True
        assert len(logger.session_id) == 12
