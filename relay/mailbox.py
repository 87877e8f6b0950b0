"""Single-slot mailboxes polled by the Unreal scene"""

import threading
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Prediction:
    """A fortune waiting to be shown"""
    text: str


@dataclass(frozen=True)
class Cue:
    """A scene cue with its data and creation time in epoch milliseconds"""
    cue: str
    data: Any = field(default_factory=dict)
    timestamp: int = field(default_factory=lambda: int(time.time() * 1000))

    def to_dict(self) -> Dict[str, Any]:
        return {"cue": self.cue, "data": self.data, "timestamp": self.timestamp}


class Mailbox(Generic[T]):
    """Holds at most one pending value

    A put overwrites any value nobody has taken yet; take returns the value
    and empties the slot in one step.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value: Optional[T] = None

    def put(self, value: T) -> None:
        with self._lock:
            self._value = value

    def take(self) -> Optional[T]:
        """Retrieve and clear the pending value; None when empty"""
        with self._lock:
            value, self._value = self._value, None
            return value

    def is_empty(self) -> bool:
        with self._lock:
            return self._value is None


class CueLog:
    """Append-only history of every cue received"""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: List[Cue] = []

    def append(self, cue: Cue) -> None:
        with self._lock:
            self._entries.append(cue)

    def entries(self) -> List[Cue]:
        """Snapshot in insertion order"""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
