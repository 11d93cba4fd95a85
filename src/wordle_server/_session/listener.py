# Area: Session
"""
wordle_server._session.listener — Accept loop
=============================================

Accepts connections on a bound, listening socket and hands each one to
its own daemon thread. Workers are neither counted nor joined; each
cleans up after itself. Accept errors are logged and skipped. If a
worker cannot be started, the client gets a fatal-error line and is
disconnected while the loop carries on.
"""

from __future__ import annotations

import logging
import socket
import threading
from typing import Callable, Optional, Tuple

from . import messages
from .session import format_peer, serve_connection
from .._game.words import WordRepository
from .._shared.line_stream import WIRE_ENCODING
from .._stats.registry import StatsRegistry

logger = logging.getLogger("wordle_server.listener")

# (conn, address, words, stats) -> None
ConnectionHandler = Callable[[socket.socket, Tuple, WordRepository, StatsRegistry], None]


def reject_connection(conn: socket.socket) -> None:
    """Best-effort fatal-error notice, then close."""
    try:
        conn.sendall(messages.FATAL_ERROR.encode(WIRE_ENCODING))
    except OSError as e:
        logger.debug(f"Could not notify rejected client: {e}")
    finally:
        conn.close()


class Listener:
    """
    Thread-per-connection accept loop.

    Attributes:
        accepted: Connections accepted so far
        rejected: Connections refused because no worker could be started
    """

    def __init__(self, words: WordRepository, stats: StatsRegistry,
                 handler: ConnectionHandler = serve_connection):
        self.words = words
        self.stats = stats
        self._handler = handler
        self._running = False
        self._sock: Optional[socket.socket] = None
        self.accepted = 0
        self.rejected = 0

    @property
    def running(self) -> bool:
        return self._running

    def run(self, server_sock: socket.socket) -> None:
        """
        Accept connections until ``stop()`` is called.

        Blocks the calling thread.
        """
        self._sock = server_sock
        self._running = True
        while self._running:
            try:
                conn, address = server_sock.accept()
            except OSError as e:
                if not self._running:
                    break
                logger.warning(f"accept() failed: {e}")
                continue
            if not self._running:
                conn.close()
                break
            self._dispatch(conn, address)
        logger.info("Listener stopped")

    def stop(self) -> None:
        """Stop accepting. Wakes a thread blocked in ``accept()``."""
        self._running = False
        if self._sock is not None:
            try:
                self._sock.shutdown(socket.SHUT_RDWR)
            except OSError:
                # Not connected / already closed
                pass

    def _dispatch(self, conn: socket.socket, address: Tuple) -> None:
        peer = format_peer(address)
        self.accepted += 1
        try:
            worker = threading.Thread(
                target=self._handler,
                args=(conn, address, self.words, self.stats),
                name=f"session-{peer}",
                daemon=True,
            )
            worker.start()
        except (RuntimeError, MemoryError) as e:
            self.rejected += 1
            logger.error(f"[{peer}] Could not start session worker: {e}",
                         extra={"session_id": peer})
            reject_connection(conn)
