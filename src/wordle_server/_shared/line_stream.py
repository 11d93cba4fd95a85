# Area: Shared
"""
wordle_server._shared.line_stream — Line-oriented connection I/O
================================================================

Wraps a connected socket (or any pair of text file objects) as a
stream of ``\\n``-terminated lines. Reads return ``None`` once the peer
has gone away; writes to a dead peer are swallowed and remembered so
the failure surfaces at the next read instead of unwinding the caller.
"""

from __future__ import annotations

import logging
import socket
from typing import Optional, TextIO

logger = logging.getLogger("wordle_server.stream")

# Single-byte encoding: every byte on the wire maps to exactly one character
WIRE_ENCODING = "latin-1"

# Errors that mean "the peer is gone" rather than a programming error
_STREAM_ERRORS = (OSError, ValueError)


class LineStream:
    """
    Bidirectional line stream over a reader/writer pair.

    Attributes:
        name: Label used in log messages (usually the peer address)
        broken: True once a write or flush has failed
    """

    def __init__(self, reader: TextIO, writer: TextIO, name: str = "stream",
                 sock: Optional[socket.socket] = None):
        self._reader = reader
        self._writer = writer
        self._sock = sock
        self.name = name
        self.broken = False

    @classmethod
    def from_socket(cls, sock: socket.socket, name: str = "stream") -> "LineStream":
        """Build a stream with separate buffered read/write files on ``sock``."""
        reader = sock.makefile("r", encoding=WIRE_ENCODING, newline="\n")
        writer = sock.makefile("w", encoding=WIRE_ENCODING, newline="\n")
        return cls(reader, writer, name=name, sock=sock)

    def read_line(self) -> Optional[str]:
        """
        Read one line without its terminator.

        A ``\\r`` directly before the ``\\n`` is dropped as well. A final
        unterminated line is returned as-is.

        Returns:
            The line, or None on end of stream or a stream error
        """
        try:
            line = self._reader.readline()
        except _STREAM_ERRORS as e:
            logger.debug(f"[{self.name}] read failed: {e}")
            return None
        if not line:
            return None
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line

    def write(self, text: str) -> None:
        """Buffer ``text`` for the peer. Failures mark the stream broken."""
        if self.broken:
            return
        try:
            self._writer.write(text)
        except _STREAM_ERRORS as e:
            self._mark_broken(e)

    def flush(self) -> None:
        if self.broken:
            return
        try:
            self._writer.flush()
        except _STREAM_ERRORS as e:
            self._mark_broken(e)

    def send(self, text: str) -> None:
        """Write ``text`` and flush it."""
        self.write(text)
        self.flush()

    def close(self) -> None:
        """Close both files and the underlying socket. Safe to call twice."""
        for f in (self._writer, self._reader):
            try:
                f.close()
            except _STREAM_ERRORS as e:
                logger.debug(f"[{self.name}] close failed: {e}")
        if self._sock is not None:
            try:
                self._sock.close()
            except OSError as e:
                logger.debug(f"[{self.name}] socket close failed: {e}")

    def _mark_broken(self, error: Exception) -> None:
        logger.debug(f"[{self.name}] write failed, peer gone: {error}")
        self.broken = True
