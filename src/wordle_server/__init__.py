"""
wordle_server — Multiplayer Wordle over TCP
===========================================

Each client that connects gets its own menu-driven session: play
rounds, change the word length or number of tries, or pin the answer
for the next round. The server keeps process-wide win/loss statistics,
printed to stderr whenever it receives SIGHUP.

Quick Start:
    $ wordle-server -answers answers.txt -guesses guesses.txt 127.0.0.1 4000
    $ wordle-client 127.0.0.1 4000

From Python:
    from wordle_server import WordleServer, validate_config
    server = WordleServer(validate_config({"port": "4000"}))
    server.run()

Scoring on its own:
    from wordle_server import score
    score("crane", "trace", 5).render()   # 'cRA-E'
"""

from .server import WordleServer, open_server
from ._server_config import ServerConfig, validate_config
from ._game import HintMark, HintResult, score, WordList, WordRepository, validate_guess
from ._session import Listener, Session, SessionState, RoundOutcome
from ._stats import StatsRegistry, StatsReporter, StatsSnapshot, StatCounter
from .errors import (
    WordleServerError,
    UsageError,
    WordListError,
    ListenError,
    InvalidGuessError,
)

__all__ = [
    # Main classes
    "WordleServer",
    "open_server",
    "ServerConfig",
    "validate_config",
    # Game rules
    "HintMark",
    "HintResult",
    "score",
    "WordList",
    "WordRepository",
    "validate_guess",
    # Sessions
    "Listener",
    "Session",
    "SessionState",
    "RoundOutcome",
    # Statistics
    "StatsRegistry",
    "StatsReporter",
    "StatsSnapshot",
    "StatCounter",
    # Errors
    "WordleServerError",
    "UsageError",
    "WordListError",
    "ListenError",
    "InvalidGuessError",
]
__version__ = "1.0.0"
