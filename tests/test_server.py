# Area: Server Tests
"""Tests for socket setup and the WordleServer runner."""

import socket
import threading
import time
from unittest.mock import patch

import pytest

from wordle_server import validate_config
from wordle_server.errors import ListenError, WordListError
from wordle_server.server import WordleServer, open_server


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep WordleServer from re-pointing the package logger at captured stdout."""
    with patch("wordle_server.server.setup_logging"):
        yield


def _config(**overrides):
    values = {"hostname": "127.0.0.1", "stats_signal": None}
    values.update(overrides)
    return validate_config(values)


class TestOpenServer:
    """Resolving, binding and listening."""

    def test_ephemeral_port(self):
        sock = open_server("127.0.0.1", "0", 4)
        try:
            host, port = sock.getsockname()
            assert host == "127.0.0.1"
            assert port > 0
        finally:
            sock.close()

    def test_all_interfaces(self):
        sock = open_server(None, "0", 4)
        try:
            assert sock.getsockname()[0] == "0.0.0.0"
        finally:
            sock.close()

    def test_port_in_use(self):
        first = open_server("127.0.0.1", "0", 4)
        try:
            port = str(first.getsockname()[1])
            with pytest.raises(ListenError) as exc_info:
                open_server("127.0.0.1", port, 4)
            assert exc_info.value.port == port
        finally:
            first.close()

    def test_unknown_service_name(self):
        with pytest.raises(ListenError) as exc_info:
            open_server("127.0.0.1", "no-such-service-name", 4)
        assert exc_info.value.hostname == "127.0.0.1"


class TestWordleServer:
    """Construction, binding and the serve loop."""

    def test_missing_word_file_raises(self, tmp_path):
        config = _config(answers_path=str(tmp_path / "missing.txt"))
        with pytest.raises(WordListError):
            WordleServer(config)

    def test_loads_word_files(self, tmp_path):
        answers = tmp_path / "answers.txt"
        guesses = tmp_path / "guesses.txt"
        answers.write_text("trace\n")
        guesses.write_text("trace\ncrane\n")
        server = WordleServer(_config(answers_path=str(answers), guesses_path=str(guesses)))
        assert len(server.words.answers) == 1
        assert len(server.words.guesses) == 2

    def test_bind_reports_port(self, words, capsys):
        server = WordleServer(_config(), words=words)
        try:
            port = server.bind()
            assert port == server.port
            assert capsys.readouterr().err == f"Listening on 127.0.0.1 port {port}\n"
        finally:
            server.close()

    def test_bind_reports_all_interfaces(self, words, capsys):
        server = WordleServer(_config(hostname=None), words=words)
        try:
            port = server.bind()
            assert f"Listening on ALL port {port}\n" in capsys.readouterr().err
        finally:
            server.close()

    def test_port_is_none_before_bind(self, words):
        assert WordleServer(_config(), words=words).port is None

    def test_run_serves_until_stopped(self, words):
        server = WordleServer(_config(), words=words)
        port = server.bind()
        thread = threading.Thread(target=server.run, daemon=True)
        thread.start()

        with socket.create_connection(("127.0.0.1", port), timeout=5) as conn:
            conn.sendall(b"4\ntrace\n1\ntrace\n5\n")
            reader = conn.makefile("r", encoding="latin-1")
            output = reader.read()
            reader.close()
        assert "Correct!\n" in output

        deadline = time.monotonic() + 3
        while server.stats.snapshot().completed < 1 and time.monotonic() < deadline:
            time.sleep(0.01)

        server.stop()
        thread.join(3)
        assert not thread.is_alive()
        assert server.port is None
        assert server.stats.snapshot().won == 1

    def test_run_propagates_listen_error(self, words):
        first = open_server("127.0.0.1", "0", 4)
        try:
            server = WordleServer(_config(port=str(first.getsockname()[1])), words=words)
            with pytest.raises(ListenError):
                server.run()
        finally:
            first.close()

    def test_stats_signal_skipped_off_main_thread(self, words):
        server = WordleServer(_config(stats_signal=1), words=words)
        with patch.object(server.reporter, "install_signal") as mock_install:
            worker = threading.Thread(target=server._install_stats_signal)
            worker.start()
            worker.join(2)
        mock_install.assert_not_called()

    def test_stats_signal_installed_on_main_thread(self, words):
        server = WordleServer(_config(stats_signal=1), words=words)
        with patch.object(server.reporter, "install_signal") as mock_install:
            server._install_stats_signal()
        mock_install.assert_called_once_with(1)
