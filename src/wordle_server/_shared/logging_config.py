# Area: Shared
"""
wordle_server._shared.logging_config — Structured logging setup
===============================================================

Configures dual logging: terminal (colored) + optional file (JSON).
Operator-facing lines (listening port, stats reports) are not log
records; they go straight to stderr through ``operator_print``.
"""

from __future__ import annotations
import logging
import sys
import threading
from pathlib import Path
from typing import Optional, TextIO

from .logging_formatters import TerminalFormatter, JSONFormatter

# Package logger
logger = logging.getLogger("wordle_server")

# Serialises operator output written from several threads
_operator_lock = threading.Lock()


def setup_logging(
    log_file_path: Optional[str] = None,
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str, optional
        Path to a JSON-lines log file. No file handler when omitted.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("wordle_server")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    pkg_logger.handlers.clear()

    # Terminal handler with colors
    terminal_handler = logging.StreamHandler(sys.stdout)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


def operator_print(text: str, stream: Optional[TextIO] = None) -> None:
    """
    Write a block of operator-facing text and flush it.

    Parameters
    ----------
    text : str
        Text to write; a trailing newline is added if missing.
    stream : TextIO, optional
        Destination. Defaults to the current ``sys.stderr``.
    """
    out = stream if stream is not None else sys.stderr
    if not text.endswith("\n"):
        text += "\n"
    with _operator_lock:
        out.write(text)
        out.flush()
