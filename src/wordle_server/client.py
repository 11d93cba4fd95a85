# Area: Client
"""
wordle_server.client — Companion terminal client
================================================

Relays stdin to the server and the server's lines to stdout, one line
at a time, with no knowledge of the game protocol.

Usage:
    wordle-client hostname port
"""

from __future__ import annotations

import logging
import socket
import sys
import threading
from typing import List, Optional, TextIO

from ._server_config import EXIT_BAD_USAGE, EXIT_LISTEN_FAIL, EXIT_OK
from ._shared.line_stream import LineStream
from .cli import ArgumentParser
from .errors import UsageError

logger = logging.getLogger("wordle_server.client")

USAGE = "Usage: wordle-client hostname port"

# Same code the server uses for "could not open the socket"
EXIT_CONNECTION_FAIL = EXIT_LISTEN_FAIL


def relay_input(source: TextIO, stream: LineStream, sock: Optional[socket.socket] = None) -> None:
    """Send each line of ``source`` to the server; half-close on EOF."""
    for line in source:
        if not line.endswith("\n"):
            line += "\n"
        stream.send(line)
        if stream.broken:
            return
    if sock is not None:
        try:
            sock.shutdown(socket.SHUT_WR)
        except OSError as e:
            logger.debug(f"shutdown after EOF failed: {e}")


def relay_output(stream: LineStream, sink: TextIO) -> None:
    """Print each server line until the server closes the connection."""
    while True:
        line = stream.read_line()
        if line is None:
            return
        sink.write(line + "\n")
        sink.flush()


def main(argv: Optional[List[str]] = None) -> int:
    """Client entry point."""
    parser = ArgumentParser(prog="wordle-client", allow_abbrev=False)
    parser.add_argument("hostname")
    parser.add_argument("port")
    try:
        args = parser.parse_args(argv)
    except UsageError:
        print(USAGE, file=sys.stderr)
        return EXIT_BAD_USAGE

    try:
        sock = socket.create_connection((args.hostname, args.port))
    except (OSError, UnicodeError):
        print(
            f"wordle-client: unable to connect to {args.hostname} port {args.port}",
            file=sys.stderr,
        )
        return EXIT_CONNECTION_FAIL

    stream = LineStream.from_socket(sock, name=f"{args.hostname}:{args.port}")
    sender = threading.Thread(
        target=relay_input, args=(sys.stdin, stream, sock),
        name="client-stdin", daemon=True,
    )
    sender.start()
    try:
        relay_output(stream, sys.stdout)
    except KeyboardInterrupt:
        logger.debug("Interrupted, closing connection")
    finally:
        stream.close()
    return EXIT_OK
