# Area: Shared
"""
wordle_server.cli — Command-line interface
==========================================

Provides the ``wordle-server`` entry point.

Usage:
    wordle-server [-answers file] [-guesses file] [hostname] [port]
    python -m wordle_server -answers answers.txt 127.0.0.1 4000

Settings can also come from the environment or a ``.env`` file
(command-line arguments win):
    WORDLE_ANSWERS, WORDLE_GUESSES, WORDLE_HOSTNAME, WORDLE_PORT,
    WORDLE_LOG_FILE, WORDLE_LOG_LEVEL

Exit codes:
    0  normal shutdown
    1  bad usage
    2  word list file missing or unreadable
    3  unable to listen on the requested address
"""

import argparse
import os
import re
import sys
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from ._server_config import (
    ENV_MAPPINGS,
    EXIT_BAD_USAGE,
    EXIT_FNF,
    EXIT_LISTEN_FAIL,
    EXIT_OK,
    validate_config,
)
from .errors import ListenError, UsageError, WordListError
from .server import WordleServer

USAGE = "Usage: wordle-server [-answers file] [-guesses file] [hostname] [port]"

# Tokens argparse reads as positionals even though they start with "-"
_NEGATIVE_NUMBER = re.compile(r"^-\d+$|^-\d*\.\d+$")


class ArgumentParser(argparse.ArgumentParser):
    """
    ArgumentParser that raises UsageError instead of exiting with status 2.

    Options must be spelled out in full: "-ans" or "-a" is an unknown
    option, not an abbreviation of "-answers".
    """

    def error(self, message: str):
        raise UsageError(message)

    def parse_known_args(self, args=None, namespace=None):
        argv = sys.argv[1:] if args is None else list(args)
        for token in argv:
            if token == "--":
                break
            if len(token) < 2 or not token.startswith("-") or _NEGATIVE_NUMBER.match(token):
                continue
            name = token.split("=", 1)[0]
            if name not in self._option_string_actions:
                self.error(f"unrecognized option: {token}")
        return super().parse_known_args(argv, namespace)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="wordle-server",
        description="Multiplayer Wordle over a line-oriented TCP protocol",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
        epilog="""
Examples:
  wordle-server
  wordle-server -answers answers.txt -guesses guesses.txt
  wordle-server 127.0.0.1 4000
  kill -HUP <pid>        # print server stats to stderr
        """,
    )

    parser.add_argument(
        "-answers",
        dest="answers_path",
        metavar="file",
        help="Word list answers are drawn from (default: default-answers.txt)",
    )

    parser.add_argument(
        "-guesses",
        dest="guesses_path",
        metavar="file",
        help="Word list guesses must appear in (default: default-guesses.txt)",
    )

    parser.add_argument(
        "--log-file",
        dest="log_file",
        help="Also write JSON logs to this file",
    )

    parser.add_argument(
        "--log-level",
        dest="log_level",
        help="Logging level (default: INFO)",
    )

    parser.add_argument(
        "hostname",
        nargs="?",
        help="Interface to listen on (default: all interfaces)",
    )

    parser.add_argument(
        "port",
        nargs="?",
        help="Port to listen on (default: 0, an ephemeral port)",
    )

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Raises:
        UsageError: On unknown options, missing option values or extra arguments
    """
    return build_parser().parse_args(argv)


def load_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Merge environment (and .env) settings with command-line arguments."""
    config: Dict[str, Any] = {}

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    for key in ("answers_path", "guesses_path", "hostname", "port",
                "log_file", "log_level"):
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()

    try:
        args = parse_args(argv)
        config = validate_config(load_config(args))
    except UsageError as e:
        print(f"wordle-server: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return EXIT_BAD_USAGE

    try:
        server = WordleServer(config)
    except WordListError as e:
        print(f"wordle-server: {e}", file=sys.stderr)
        return EXIT_FNF

    try:
        server.run()
    except ListenError as e:
        print(
            f"wordle-server: unable to listen on {e.hostname or 'ALL'} port {e.port}",
            file=sys.stderr,
        )
        return EXIT_LISTEN_FAIL

    return EXIT_OK
