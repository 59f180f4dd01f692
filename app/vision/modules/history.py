"""
Rolling in-memory history of mood/posture results, one buffer per user.
"""

import threading
from collections import deque
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Deque, Dict, List, Optional

DEFAULT_HISTORY_SIZE = 20


@dataclass(frozen=True)
class HistoryEntry:
    time: str
    label: str
    type: str
    suggestion: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


class WellnessHistory:
    """
    Keeps the last `max_entries` results per user.

    A new result is recorded only when its second-resolution time or its
    label differs from the newest entry, which throttles a per-frame stream
    to at most one entry per second per label.
    """

    def __init__(self, max_entries: int = DEFAULT_HISTORY_SIZE):
        self._max_entries = max_entries
        self._buffers: Dict[str, Deque[HistoryEntry]] = {}
        self._lock = threading.Lock()

    def record(
        self,
        user_id: str,
        label: str,
        entry_type: str,
        suggestion: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> bool:
        """Returns True when the entry was appended."""
        entry = HistoryEntry(
            time=(now or datetime.now()).strftime('%H:%M:%S'),
            label=label,
            type=entry_type,
            suggestion=suggestion,
        )
        with self._lock:
            buffer = self._buffers.setdefault(user_id, deque(maxlen=self._max_entries))
            if buffer:
                last = buffer[-1]
                if last.time == entry.time and last.label == entry.label:
                    return False
            buffer.append(entry)
            return True

    def entries(self, user_id: str) -> List[HistoryEntry]:
        with self._lock:
            return list(self._buffers.get(user_id, ()))

    def clear(self, user_id: str) -> None:
        with self._lock:
            self._buffers.pop(user_id, None)
