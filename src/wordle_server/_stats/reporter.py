# Area: Stats
"""
wordle_server._stats.reporter — Out-of-band stats reports
=========================================================

A daemon thread blocks on a trigger queue and writes one report per
trigger. Triggers normally come from a signal (SIGHUP by default); the
signal handler only enqueues, because ``queue.SimpleQueue.put`` is safe
to call from a signal handler while the main thread sits in ``accept``.
"""

from __future__ import annotations

import logging
import queue
import signal
import threading
from typing import Any, Optional, TextIO

from .registry import StatsRegistry
from .._shared.logging_config import operator_print

logger = logging.getLogger("wordle_server.stats")

_REPORT = "report"
_STOP = "stop"


class StatsReporter:
    """
    Emits a StatsRegistry report each time it is triggered.

    Attributes:
        reports_emitted: Number of reports written so far
    """

    def __init__(self, registry: StatsRegistry, stream: Optional[TextIO] = None):
        self._registry = registry
        self._stream = stream
        self._triggers: "queue.SimpleQueue[str]" = queue.SimpleQueue()
        self._thread: Optional[threading.Thread] = None
        self.reports_emitted = 0

    def start(self) -> None:
        """Start the reporter thread. No-op if already running."""
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(
            target=self._run, name="stats-reporter", daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: Optional[float] = None) -> None:
        """Ask the reporter thread to exit and wait for it."""
        if self._thread is None:
            return
        self._triggers.put(_STOP)
        self._thread.join(timeout)
        self._thread = None

    def trigger(self) -> None:
        """Request one report."""
        self._triggers.put(_REPORT)

    def install_signal(self, signum: int) -> Any:
        """
        Trigger a report whenever ``signum`` is delivered.

        Must be called from the main thread.

        Returns:
            The previously installed handler
        """
        previous = signal.signal(signum, self._on_signal)
        logger.debug(f"Stats reports on signal {signal.Signals(signum).name}")
        return previous

    def _on_signal(self, signum, frame) -> None:
        self.trigger()

    def _run(self) -> None:
        while True:
            item = self._triggers.get()
            if item == _STOP:
                break
            try:
                self.emit()
            except OSError as e:
                logger.error(f"Could not write stats report: {e}")

    def emit(self) -> None:
        """Write a report while holding the registry lock."""
        with self._registry.hold() as snapshot:
            operator_print(snapshot.format_report(), self._stream)
        self.reports_emitted += 1
        logger.debug(
            "Stats reported: connected=%d completed=%d won=%d lost=%d",
            snapshot.connected, snapshot.completed, snapshot.won, snapshot.lost,
        )
