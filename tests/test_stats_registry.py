# Area: Stats Tests
"""Tests for StatsRegistry counters and locking."""

import threading
from datetime import datetime

from wordle_server._stats.registry import StatCounter, StatsRegistry, StatsSnapshot


class TestStatsRegistry:
    """Counter updates."""

    def test_starts_at_zero(self):
        snapshot = StatsRegistry().snapshot()
        assert (snapshot.connected, snapshot.completed, snapshot.won, snapshot.lost) == (0, 0, 0, 0)

    def test_increment(self):
        registry = StatsRegistry()
        registry.increment(StatCounter.WON)
        registry.increment(StatCounter.WON)
        assert registry.get(StatCounter.WON) == 2

    def test_session_lifecycle(self):
        registry = StatsRegistry()
        registry.session_started()
        assert registry.get(StatCounter.CONNECTED) == 1
        registry.session_finished()
        assert registry.get(StatCounter.CONNECTED) == 0
        assert registry.get(StatCounter.COMPLETED) == 1

    def test_record_round(self):
        registry = StatsRegistry()
        registry.record_round(True)
        registry.record_round(False)
        registry.record_round(False)
        snapshot = registry.snapshot()
        assert snapshot.won == 1
        assert snapshot.lost == 2

    def test_connected_never_negative(self):
        registry = StatsRegistry()
        registry.session_finished()
        assert registry.get(StatCounter.CONNECTED) == 0
        assert registry.get(StatCounter.COMPLETED) == 1

    def test_hold_blocks_updates(self):
        registry = StatsRegistry()
        started = threading.Event()

        def bump():
            started.set()
            registry.record_round(True)

        with registry.hold() as snapshot:
            worker = threading.Thread(target=bump)
            worker.start()
            started.wait(1)
            worker.join(0.05)
            assert worker.is_alive()
            assert snapshot.won == 0
        worker.join(1)
        assert registry.get(StatCounter.WON) == 1


class TestStatsConcurrency:
    """Many sessions finishing at once."""

    def test_concurrent_sessions_balance(self):
        registry = StatsRegistry()
        sessions = 50
        barrier = threading.Barrier(sessions)

        def session(index):
            registry.session_started()
            barrier.wait()
            registry.record_round(index % 3 == 0)
            registry.session_finished()

        threads = [threading.Thread(target=session, args=(i,)) for i in range(sessions)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(5)

        snapshot = registry.snapshot()
        assert snapshot.connected == 0
        assert snapshot.completed == sessions
        assert snapshot.won + snapshot.lost == sessions
        assert snapshot.won == len(range(0, sessions, 3))


class TestStatsSnapshot:
    """Report formatting."""

    def test_format_report(self):
        snapshot = StatsSnapshot(
            connected=2, completed=5, won=3, lost=1,
            taken_at=datetime(2026, 1, 2, 3, 4, 5),
        )
        report = snapshot.format_report()
        lines = report.splitlines()
        assert lines[0].startswith("Server Stats at ")
        assert lines[1:] == [
            "Connected clients: 2",
            "Completed clients: 5",
            "Games won:         3",
            "Games lost:        1",
        ]
