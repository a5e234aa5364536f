"""TCP echo server that answers each read with "echo# ", and a line-based client."""

from __future__ import annotations

import socket
import sys
import threading
from collections.abc import Iterable, Sequence
from typing import Protocol, TextIO

from echolab.log import LogLevel, log

__all__ = [
    "DEFAULT_PORT",
    "BACKLOG",
    "BUFFER_SIZE",
    "SOCKET_ERROR",
    "BIND_ERROR",
    "LISTEN_ERROR",
    "ServerError",
    "TcpServer",
    "TcpClient",
    "echo_reply",
    "run_client",
    "server_main",
    "client_main",
]

DEFAULT_PORT = 8888
BACKLOG = 8
BUFFER_SIZE = 1024

SOCKET_ERROR = 1
BIND_ERROR = 2
LISTEN_ERROR = 3

_POLL_INTERVAL = 0.2


class ServerError(Exception):
    """A server could not be set up; ``code`` is the process exit status to use."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code


def echo_reply(data: bytes) -> bytes:
    """The bytes the server sends back for one read from a client."""
    return b"echo# " + data


class TcpServer:
    """Listens on a port and echoes each client's data back, one client at a time."""

    def __init__(
        self, port: int = DEFAULT_PORT, host: str = "", out: TextIO | None = None
    ) -> None:
        self.port = port
        self.host = host
        self.out = out
        self._sock: socket.socket | None = None
        self._running = threading.Event()

    @property
    def address(self) -> tuple[str, int]:
        """The address the listening socket is bound to."""
        return self._require_socket().getsockname()[:2]

    def _require_socket(self) -> socket.socket:
        if self._sock is None:
            raise RuntimeError("server has not been started")
        return self._sock

    def _emit(self, text: str) -> None:
        stream = self.out if self.out is not None else sys.stdout
        stream.write(text)
        stream.flush()

    def start(self) -> None:
        """Create, bind and listen; raise ServerError on failure."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as exc:
            log(LogLevel.FATAL, "SOCKET CREATE ERROR!\n")
            raise ServerError(SOCKET_ERROR, "cannot create socket") from exc
        log(LogLevel.INFO, "CREATE SOCKET SUCCESS,SOCKFD:%d\n", sock.fileno())

        try:
            sock.bind((self.host, self.port))
        except OSError as exc:
            sock.close()
            log(LogLevel.FATAL, "BIND SOCKET ERROR!\n")
            raise ServerError(BIND_ERROR, f"cannot bind port {self.port}") from exc
        log(LogLevel.INFO, "BIND SOCKET SUCCESS!\n")

        try:
            sock.listen(BACKLOG)
        except OSError as exc:
            sock.close()
            log(LogLevel.FATAL, "LISTEN SOCKET ERROR!\n")
            raise ServerError(LISTEN_ERROR, "cannot listen") from exc
        log(LogLevel.INFO, "LISTEN SOCKET SUCCESS!\n")
        self._sock = sock

    def serve_forever(self) -> None:
        """Accept connections and serve each in turn until stop() is called."""
        sock = self._require_socket()
        sock.settimeout(_POLL_INTERVAL)
        self._running.set()
        while self._running.is_set():
            try:
                conn, address = sock.accept()
            except TimeoutError:
                continue
            except OSError:
                if not self._running.is_set():
                    break
                log(LogLevel.INFO, "ACCEPT FAILER!\n")
                continue
            conn.settimeout(None)
            self.handle_connection(conn, address)

    def handle_connection(self, conn: socket.socket, address: tuple) -> int:
        """Echo everything one client sends until it disconnects; return reads echoed."""
        ip, port = address[0], address[1]
        log(LogLevel.INFO, "ACCEPT A NEW LINK, CLIENT INFO:%s:%d\n", ip, port)
        echoed = 0
        with conn:
            while True:
                try:
                    data = conn.recv(BUFFER_SIZE - 1)
                except OSError:
                    log(LogLevel.ERROR, "LOCAL READ ERROR!\n")
                    break
                if not data:
                    log(LogLevel.INFO, "CLIENT QUIT!\n")
                    break
                self._emit(f"[{ip}:{port}]# {data.decode(errors='replace')}\n")
                try:
                    conn.sendall(echo_reply(data))
                except OSError:
                    break
                echoed += 1
        return echoed

    def stop(self) -> None:
        """Ask serve_forever to return after its current wait."""
        self._running.clear()

    def close(self) -> None:
        self._running.clear()
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> TcpServer:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class TcpClient:
    """A connection to an echo server that sends one line and reads one reply."""

    def __init__(self, host: str, port: int, timeout: float | None = None) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self._sock: socket.socket | None = None

    def connect(self) -> None:
        if self._sock is None:
            self._sock = socket.create_connection((self.host, self.port), timeout=self.timeout)

    def send(self, line: str) -> str:
        """Send a line and return the server's reply; ValueError for an empty line."""
        if self._sock is None:
            raise RuntimeError("client is not connected")
        payload = line.encode()
        if not payload:
            raise ValueError("nothing to send")
        self._sock.sendall(payload)
        return self._sock.recv(BUFFER_SIZE - 1).decode(errors="replace")

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> TcpClient:
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class _LineSender(Protocol):
    def send(self, line: str) -> str: ...


def run_client(client: _LineSender, lines: Iterable[str], out: TextIO | None = None) -> int:
    """Prompt, send each line and print the reply until "quit"; return replies shown."""
    stream = out if out is not None else sys.stdout
    source = iter(lines)
    exchanged = 0
    while True:
        stream.write("Say # ")
        stream.flush()
        try:
            line = next(source).rstrip("\n")
        except StopIteration:
            break
        if line == "quit":
            stream.write("client quit\n")
            break
        try:
            reply = client.send(line)
        except (OSError, ValueError):
            log(LogLevel.ERROR, "CLIENT WRITE FAILED!\n")
            continue
        stream.write(f"SERVER ECHO# {reply}\n")
        exchanged += 1
    stream.flush()
    return exchanged


def _parse_port(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        print(f"invalid port: {text}", file=sys.stderr)
        return None


def server_main(argv: Sequence[str] | None = None) -> int:
    """Run the TCP echo server: tcpserver local-port."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("tcpserver local-port")
        return 0
    port = _parse_port(args[0])
    if port is None:
        return 1
    try:
        with TcpServer(port) as server:
            server.serve_forever()
    except ServerError as exc:
        return exc.code
    except KeyboardInterrupt:
        return 0
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive TCP client: tcpclient server-ip server-port."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("tcpclient server-ip server-port")
        return 0
    port = _parse_port(args[1])
    if port is None:
        return 1
    client = TcpClient(args[0], port)
    try:
        client.connect()
    except OSError:
        log(LogLevel.FATAL, "CONNECT SOCKET CREATE ERROR!\n")
        return 1
    with client:
        run_client(client, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(server_main())