"""Event system connecting the evaluator to the renderer and logger."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List


class EventType(Enum):
    HAND_PARSED = "hand_parsed"
    WAITS_CALCULATED = "waits_calculated"
    EMPTY_INPUT = "empty_input"
    INPUT_REJECTED = "input_rejected"
    RANDOM_HAND = "random_hand"
    SESSION_END = "session_end"


@dataclass
class Event:
    """An event emitted by the evaluator."""
    event_type: EventType
    data: Dict[str, Any] = field(default_factory=dict)


class EventBus:
    """Publish/subscribe bus; listeners run synchronously in subscription order."""

    def __init__(self):
        self._listeners: Dict[EventType, List[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: EventType, callback: Callable[[Event], None]):
        self._listeners.setdefault(event_type, []).append(callback)

    def emit(self, event: Event):
        for callback in self._listeners.get(event.event_type, []):
            callback(event)

    def clear(self):
        self._listeners.clear()
