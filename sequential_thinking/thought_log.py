"""Append-only, ordered log of reasoning steps."""

import logging
import threading
from typing import List

from sequential_thinking.models import ThoughtEntry

logger = logging.getLogger(__name__)


class ThoughtLog:
    """Ordered record of ThoughtEntry items for one server instance.

    Entries are never removed or rewritten. Appending and reading the
    resulting length happen under one lock, so every caller gets a unique
    step number even when calls are handled concurrently.
    """

    def __init__(self) -> None:
        self._entries: List[ThoughtEntry] = []
        self._lock = threading.Lock()

    def append(self, thought: str, next_move: str) -> int:
        """Record a step and return its 1-based position."""
        with self._lock:
            self._entries.append(ThoughtEntry(thought=thought, next_move=next_move))
            step_number = len(self._entries)
        logger.debug("Recorded thought step %d", step_number)
        return step_number

    def entries(self) -> List[ThoughtEntry]:
        """Snapshot of all entries in insertion order."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
