"""Session logger - records every evaluation of a session to a JSON file."""

import json
import os
import uuid
from datetime import datetime
from typing import List

from machi.engine.event import Event, EventBus, EventType
from machi.ui.tile_display import tile_to_simple_str


class SessionLogger:
    """Records evaluations and rejected inputs to JSON log files."""

    def __init__(self, log_dir: str, config_info: dict):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.log_dir = log_dir
        self.config_info = config_info

        self.entries: List[dict] = []

    def subscribe_events(self, event_bus: EventBus):
        """Subscribe to evaluator events for automatic logging."""
        event_bus.subscribe(EventType.WAITS_CALCULATED, self._on_waits)
        event_bus.subscribe(EventType.INPUT_REJECTED, self._on_rejected)

    def save(self) -> str:
        """Save the session log to a JSON file and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "evaluations": self.entries,
        }

        os.makedirs(self.log_dir, exist_ok=True)
        filepath = os.path.join(self.log_dir, f"session_{self.session_id}.json")

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath

    # --- Event handlers ---

    def _on_waits(self, event: Event):
        d = event.data
        hand = d["hand"]
        self.entries.append({
            "kind": "evaluation",
            "time": datetime.now().isoformat(),
            "hand": hand.to_string(),
            "tile_count": len(hand),
            "is_random": d.get("is_random", False),
            "waits": [
                {
                    "tile": tile_to_simple_str(w.tile),
                    "shapes": list(w.shapes),
                    "decompositions": [dec.name for dec in w.decompositions],
                }
                for w in d["waits"]
            ],
        })

    def _on_rejected(self, event: Event):
        d = event.data
        self.entries.append({
            "kind": "rejected",
            "time": datetime.now().isoformat(),
            "text": d["text"],
            "error": str(d["error"]),
        })
