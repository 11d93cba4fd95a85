"""
wordle_server.errors — Custom exception classes
================================================

Defines the exception hierarchy for the server.
Startup errors carry enough context for the CLI to pick an exit code
and print a one-line diagnostic; guess errors carry the reason shown
to the player.
"""

from __future__ import annotations
from typing import Optional


class WordleServerError(Exception):
    """Base exception for all wordle_server errors."""
    pass


class UsageError(WordleServerError):
    """Raised when the command line or configuration is malformed."""
    pass


class WordListError(WordleServerError):
    """Raised when a word list file cannot be opened or read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ListenError(WordleServerError):
    """Raised when the listening socket cannot be resolved, bound or opened."""

    def __init__(self, hostname: Optional[str], port: str, reason: str = ""):
        self.hostname = hostname
        self.port = port
        self.reason = reason
        super().__init__(
            f"unable to listen on {hostname} port {port}"
            + (f" ({reason})" if reason else "")
        )


class InvalidGuessError(WordleServerError):
    """
    Raised when a guess is not a word of the required shape.

    ``reason`` is one of ``NON_LETTER`` or ``WRONG_LENGTH``. The round
    loop reports it to the player and re-prompts without spending a try.
    """

    NON_LETTER = "non-letter"
    WRONG_LENGTH = "wrong-length"

    def __init__(self, reason: str, word_length: int):
        self.reason = reason
        self.word_length = word_length
        super().__init__(f"Invalid guess ({reason}), expected {word_length} letters")
