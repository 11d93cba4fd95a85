# Area: Stats
"""
wordle_server._stats.registry — Process-wide play statistics
============================================================

Four counters shared by every session, each update and read taken
under one lock. Fields are updated independently; the only compound
update is session teardown, which moves a client from ``connected`` to
``completed`` in a single critical section.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Iterator

logger = logging.getLogger("wordle_server.stats")


class StatCounter(Enum):
    """Names of the tracked counters."""
    CONNECTED = "connected"
    COMPLETED = "completed"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class StatsSnapshot:
    """Counter values read together under the registry lock."""

    connected: int
    completed: int
    won: int
    lost: int
    taken_at: datetime = field(default_factory=datetime.now)

    def format_report(self) -> str:
        """Operator report, one counter per line."""
        stamp = self.taken_at.strftime("%c") or "????"
        return (
            f"Server Stats at {stamp}\n"
            f"Connected clients: {self.connected}\n"
            f"Completed clients: {self.completed}\n"
            f"Games won:         {self.won}\n"
            f"Games lost:        {self.lost}\n"
        )


class StatsRegistry:
    """Mutex-guarded counters for connected, completed, won and lost."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: Dict[StatCounter, int] = {c: 0 for c in StatCounter}

    def increment(self, counter: StatCounter) -> None:
        with self._lock:
            self._counts[counter] += 1

    def session_started(self) -> None:
        self.increment(StatCounter.CONNECTED)

    def session_finished(self) -> None:
        """Move one client from connected to completed."""
        with self._lock:
            if self._counts[StatCounter.CONNECTED] > 0:
                self._counts[StatCounter.CONNECTED] -= 1
            else:
                logger.error("Session teardown with no connected clients")
            self._counts[StatCounter.COMPLETED] += 1

    def record_round(self, won: bool) -> None:
        self.increment(StatCounter.WON if won else StatCounter.LOST)

    def get(self, counter: StatCounter) -> int:
        with self._lock:
            return self._counts[counter]

    def snapshot(self) -> StatsSnapshot:
        with self._lock:
            return self._snapshot_locked()

    @contextmanager
    def hold(self) -> Iterator[StatsSnapshot]:
        """
        Keep the lock for the duration of the block.

        Yields the snapshot taken on entry; no counter can change until
        the block exits.
        """
        with self._lock:
            yield self._snapshot_locked()

    def _snapshot_locked(self) -> StatsSnapshot:
        return StatsSnapshot(
            connected=self._counts[StatCounter.CONNECTED],
            completed=self._counts[StatCounter.COMPLETED],
            won=self._counts[StatCounter.WON],
            lost=self._counts[StatCounter.LOST],
        )
