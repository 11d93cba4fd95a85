# Area: Client Tests
"""Tests for the terminal client relays and entry point."""

import io
import socket
from unittest.mock import MagicMock, patch

from wordle_server import client
from wordle_server._shared.line_stream import LineStream


class TestRelays:
    """Line relays in each direction."""

    def test_relay_input_sends_lines_and_half_closes(self):
        stream = MagicMock(broken=False)
        sock = MagicMock()
        client.relay_input(io.StringIO("1\ncrane"), stream, sock)
        assert [c.args[0] for c in stream.send.call_args_list] == ["1\n", "crane\n"]
        sock.shutdown.assert_called_once_with(socket.SHUT_WR)

    def test_relay_input_stops_when_broken(self):
        stream = MagicMock(broken=True)
        sock = MagicMock()
        client.relay_input(io.StringIO("1\n2\n"), stream, sock)
        assert stream.send.call_count == 1
        sock.shutdown.assert_not_called()

    def test_relay_output_copies_lines(self):
        stream = LineStream(io.StringIO("Welcome\r\nGoodbye...\n"), io.StringIO())
        sink = io.StringIO()
        client.relay_output(stream, sink)
        assert sink.getvalue() == "Welcome\nGoodbye...\n"


class TestClientMain:
    """Entry point exit codes."""

    def test_usage(self, capsys):
        assert client.main(["localhost"]) == 1
        assert client.USAGE in capsys.readouterr().err

    def test_connection_failure(self, capsys):
        with patch("wordle_server.client.socket.create_connection",
                   side_effect=ConnectionRefusedError()):
            assert client.main(["127.0.0.1", "1"]) == client.EXIT_CONNECTION_FAIL
        assert "unable to connect to 127.0.0.1 port 1" in capsys.readouterr().err

    def test_session_output_relayed(self, capsys):
        server_side, client_side = socket.socketpair()
        server_side.sendall(b"Welcome\nGoodbye...\n")
        server_side.close()
        with patch("wordle_server.client.socket.create_connection", return_value=client_side), \
                patch("wordle_server.client.sys.stdin", io.StringIO("")):
            assert client.main(["127.0.0.1", "4000"]) == 0
        assert capsys.readouterr().out == "Welcome\nGoodbye...\n"
