import io
import socket
import threading

import pytest

from echolab.tcp import (
    BIND_ERROR,
    ServerError,
    TcpClient,
    TcpServer,
    client_main,
    echo_reply,
    run_client,
    server_main,
)


@pytest.fixture
def running_server():
    out = io.StringIO()
    server = TcpServer(port=0, host="127.0.0.1", out=out)
    server.start()
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    yield server, out
    server.stop()
    thread.join(timeout=5)
    server.close()


class FakeClient:
    def __init__(self, fail=False):
        self.sent = []
        self.fail = fail

    def send(self, line):
        self.sent.append(line)
        if self.fail:
            raise OSError("broken")
        return "echo# " + line


def test_echo_reply_prefix():
    assert echo_reply(b"hello") == b"echo# hello"


def test_round_trip(running_server):
    server, _ = running_server
    host, port = server.address
    with TcpClient(host, port, timeout=5) as client:
        assert client.send("hello") == "echo# hello"
        assert client.send("second") == "echo# second"


def test_server_prints_client_line(running_server):
    server, out = running_server
    host, port = server.address
    with TcpClient(host, port, timeout=5) as client:
        client.send("hello")
    text = out.getvalue()
    assert text.startswith("[127.0.0.1:")
    assert text.endswith("]# hello\n")


def test_empty_line_rejected(running_server):
    server, _ = running_server
    host, port = server.address
    with TcpClient(host, port, timeout=5) as client:
        with pytest.raises(ValueError):
            client.send("")
        assert client.send("after") == "echo# after"


def test_handle_connection_over_socketpair():
    out = io.StringIO()
    server = TcpServer(out=out)
    ours, theirs = socket.socketpair()
    with theirs:
        theirs.sendall(b"ping")
        theirs.shutdown(socket.SHUT_WR)
        count = server.handle_connection(ours, ("127.0.0.1", 5555))
        assert theirs.recv(1024) == b"echo# ping"
    assert count == 1
    assert out.getvalue() == "[127.0.0.1:5555]# ping\n"


def test_bind_conflict_raises():
    occupant = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    with occupant:
        occupant.bind(("127.0.0.1", 0))
        occupant.listen()
        port = occupant.getsockname()[1]
        server = TcpServer(port=port, host="127.0.0.1")
        with pytest.raises(ServerError) as excinfo:
            server.start()
    assert excinfo.value.code == BIND_ERROR


def test_address_before_start():
    with pytest.raises(RuntimeError):
        TcpServer().address


def test_run_client_until_quit():
    client = FakeClient()
    out = io.StringIO()
    count = run_client(client, ["a\n", "b\n", "quit\n", "c\n"], out)
    assert count == 2
    assert client.sent == ["a", "b"]
    assert out.getvalue() == (
        "Say # SERVER ECHO# echo# a\n"
        "Say # SERVER ECHO# echo# b\n"
        "Say # client quit\n"
    )


def test_run_client_write_failure_continues():
    client = FakeClient(fail=True)
    out = io.StringIO()
    count = run_client(client, ["x", "y", "quit"], out)
    assert count == 0
    assert client.sent == ["x", "y"]
    assert "SERVER ECHO#" not in out.getvalue()


def test_client_main_usage(capsys):
    assert client_main(["127.0.0.1"]) == 0
    assert "server-ip server-port" in capsys.readouterr().out


def test_server_main_usage(capsys):
    assert server_main([]) == 0
    assert "local-port" in capsys.readouterr().out


def test_client_main_refused():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    assert client_main(["127.0.0.1", str(port)]) == 1


def test_client_main_session(running_server, monkeypatch, capsys):
    server, _ = running_server
    host, port = server.address
    monkeypatch.setattr("sys.stdin", io.StringIO("hello\nquit\n"))
    assert client_main([host, str(port)]) == 0
    text = capsys.readouterr().out
    assert "SERVER ECHO# echo# hello\n" in text
    assert "client quit\n" in text


def test_server_main_bind_conflict():
    occupant = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    with occupant:
        occupant.bind(("", 0))
        occupant.listen()
        port = occupant.getsockname()[1]
        assert server_main([str(port)]) == BIND_ERROR