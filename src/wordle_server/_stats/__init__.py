# Area: Stats
"""Process-wide play statistics and the signal-driven reporter."""

from .registry import StatCounter, StatsRegistry, StatsSnapshot
from .reporter import StatsReporter

__all__ = [
    "StatCounter",
    "StatsRegistry",
    "StatsSnapshot",
    "StatsReporter",
]
