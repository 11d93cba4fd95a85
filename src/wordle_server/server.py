# Area: Server
"""
wordle_server.server — Server runner
====================================

The WordleServer is what ``wordle-server`` builds and calls .run() on.
It loads the word lists, binds the listening socket, reports the port
to the operator, starts the stats reporter and then serves clients on
the calling thread until interrupted.
"""

from __future__ import annotations
import logging
import socket
import threading
from typing import Optional

from ._game.words import WordRepository
from ._server_config import ServerConfig
from ._session.listener import Listener
from ._shared import operator_print, setup_logging
from ._stats.registry import StatsRegistry
from ._stats.reporter import StatsReporter
from .errors import ListenError

logger = logging.getLogger("wordle_server")


def open_server(hostname: Optional[str], port: str, backlog: int) -> socket.socket:
    """
    Resolve, bind and listen on an IPv4 TCP socket.

    Args:
        hostname: Interface to bind, or None for all interfaces
        port: Port number or service name; "0" for an ephemeral port
        backlog: Listen queue length

    Returns:
        The listening socket

    Raises:
        ListenError: If any step fails
    """
    try:
        infos = socket.getaddrinfo(
            hostname, port, socket.AF_INET, socket.SOCK_STREAM, 0, socket.AI_PASSIVE,
        )
    except (socket.gaierror, UnicodeError) as e:
        raise ListenError(hostname, port, str(e)) from e

    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(infos[0][4])
        sock.listen(backlog)
    except OSError as e:
        sock.close()
        raise ListenError(hostname, port, str(e)) from e
    return sock


class WordleServer:
    """
    Main entry point for running the game server.

    Usage
    -----
        from wordle_server import WordleServer, validate_config

        config = validate_config({"answers_path": "answers.txt",
                                  "guesses_path": "guesses.txt"})
        server = WordleServer(config)
        server.run()
    """

    def __init__(self, config: ServerConfig, words: Optional[WordRepository] = None):
        self.config = config

        setup_logging(log_file_path=config.log_file, level=config.level)

        # Raises WordListError before anything is bound
        if words is None:
            words = WordRepository.load(config.answers_path, config.guesses_path)
        self.words = words

        self.stats = StatsRegistry()
        self.reporter = StatsReporter(self.stats)
        self.listener = Listener(self.words, self.stats)
        self._sock: Optional[socket.socket] = None

    @property
    def port(self) -> Optional[int]:
        """Bound port, once ``bind()`` has run."""
        if self._sock is None:
            return None
        return self._sock.getsockname()[1]

    def bind(self) -> int:
        """
        Open the listening socket and report the port on stderr.

        Returns:
            The bound port number

        Raises:
            ListenError: If the address cannot be resolved, bound or listened on
        """
        if self._sock is None:
            self._sock = open_server(
                self.config.hostname, self.config.port, self.config.backlog,
            )
            operator_print(
                f"Listening on {self.config.display_hostname} port {self.port}"
            )
        return self.port

    # ── Main loop ─────────────────────────────────────────────

    def run(self) -> None:
        """
        Serve clients. Blocks until interrupted (Ctrl+C) or ``stop()``.
        """
        self.bind()
        self._install_stats_signal()
        self.reporter.start()
        self._log_startup()

        try:
            self.listener.run(self._sock)
        except KeyboardInterrupt:
            logger.info("Shutting down...")
        finally:
            self.close()

    def stop(self) -> None:
        """Stop accepting new clients. Running sessions are left to finish."""
        self.listener.stop()

    def close(self) -> None:
        self.listener.stop()
        self.reporter.stop(timeout=1.0)
        if self._sock is not None:
            self._sock.close()
            self._sock = None
        logger.info("Server stopped.")

    def _install_stats_signal(self) -> None:
        signum = self.config.stats_signal
        if signum is None:
            return
        if threading.current_thread() is not threading.main_thread():
            logger.debug("Not on the main thread; stats signal not installed")
            return
        self.reporter.install_signal(signum)

    def _log_startup(self) -> None:
        logger.info("=" * 60)
        logger.info("  Wordle Server — Starting")
        logger.info(f"  Listen:  {self.config.display_hostname} port {self.port}")
        logger.info(f"  Answers: {self.config.answers_path} ({len(self.words.answers)} words)")
        logger.info(f"  Guesses: {self.config.guesses_path} ({len(self.words.guesses)} words)")
        logger.info(f"  Answer lengths: {self.words.answers.lengths()}")
        logger.info("=" * 60)
