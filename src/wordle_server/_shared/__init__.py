# Area: Shared
"""
Shared utilities used by the session, stats and server layers.

This package contains:
- Logging configuration and operator output
- Line-oriented connection streams
"""

from .logging_config import setup_logging, operator_print
from .line_stream import LineStream, WIRE_ENCODING

__all__ = [
    "setup_logging",
    "operator_print",
    "LineStream",
    "WIRE_ENCODING",
]
