"""UDP echo server that answers each datagram with "[server]# ", and its client."""

from __future__ import annotations

import contextlib
import socket
import sys
import threading
from collections.abc import Iterable, Sequence
from typing import Protocol, TextIO

from echolab.log import LogLevel, log
from echolab.tcp import BIND_ERROR, SOCKET_ERROR, ServerError

__all__ = [
    "DEFAULT_PORT",
    "BUFFER_SIZE",
    "UdpServer",
    "UdpClient",
    "echo_reply",
    "run_client",
    "server_main",
    "client_main",
]

DEFAULT_PORT = 8888
BUFFER_SIZE = 1024

_POLL_INTERVAL = 0.2


def echo_reply(data: bytes) -> bytes:
    """The datagram the server sends back for one received datagram."""
    return b"[server]# " + data


class UdpServer:
    """Receives datagrams on a port and echoes each back to its sender."""

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
        """The address the socket is bound to."""
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
        """Create and bind the socket; raise ServerError on failure."""
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as exc:
            log(LogLevel.FATAL, "SOCKET CREATE FAILED!\n")
            raise ServerError(SOCKET_ERROR, "cannot create socket") from exc
        log(LogLevel.DEBUG, "SOCKET CREATE SUCCESS! _SOCKFD:%d\n", sock.fileno())

        try:
            sock.bind((self.host, self.port))
        except OSError as exc:
            sock.close()
            log(LogLevel.FATAL, "SOCKET BIND FAILED!\n")
            raise ServerError(BIND_ERROR, f"cannot bind port {self.port}") from exc
        log(LogLevel.DEBUG, "SOCKET BIND SUCCESS!\n")
        self._sock = sock

    def serve_forever(self) -> None:
        """Receive and echo datagrams until stop() is called."""
        sock = self._require_socket()
        sock.settimeout(_POLL_INTERVAL)
        self._running.set()
        while self._running.is_set():
            try:
                data, address = sock.recvfrom(BUFFER_SIZE - 1)
            except TimeoutError:
                continue
            except OSError:
                if not self._running.is_set():
                    break
                self._emit("server recvfrom error\n")
                continue
            if not data:
                self._emit("server recvfrom error\n")
                continue
            self.handle_datagram(data, address)

    def handle_datagram(self, data: bytes, address: tuple) -> bytes:
        """Print one datagram, send its echo to the sender, and return the echo."""
        sock = self._require_socket()
        ip, port = address[0], address[1]
        self._emit(f"[{ip}:{port}]# {data.decode(errors='replace')}\n")
        reply = echo_reply(data)
        with contextlib.suppress(OSError):
            sock.sendto(reply, address)
        return reply

    def stop(self) -> None:
        """Ask serve_forever to return after its current wait."""
        self._running.clear()

    def close(self) -> None:
        self._running.clear()
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def __enter__(self) -> UdpServer:
        self.start()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class UdpClient:
    """Sends lines as datagrams to a server and waits for each reply."""

    def __init__(self, host: str, port: int, timeout: float | None = None) -> None:
        self.server = (host, port)
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.settimeout(timeout)

    def send(self, line: str) -> str | None:
        """Send a line and return the reply, or None if no data went out.

        An OSError raised here means the reply could not be received.
        """
        try:
            sent = self._sock.sendto(line.encode(), self.server)
        except OSError:
            return None
        if sent <= 0:
            return None
        data, _ = self._sock.recvfrom(BUFFER_SIZE)
        return data.decode(errors="replace")

    def close(self) -> None:
        self._sock.close()

    def __enter__(self) -> UdpClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class _DatagramSender(Protocol):
    def send(self, line: str) -> str | None: ...


def run_client(
    client: _DatagramSender, lines: Iterable[str], out: TextIO | None = None
) -> int:
    """Prompt, echo and send each line, printing replies until "quit"; return replies."""
    stream = out if out is not None else sys.stdout
    source = iter(lines)
    received = 0
    while True:
        stream.write("you say# ")
        stream.flush()
        try:
            line = next(source).rstrip("\n")
        except StopIteration:
            break
        stream.write(f"{line}\n")
        if line == "quit":
            break
        try:
            reply = client.send(line)
        except OSError:
            stream.write("client recvfrom failed\n")
            continue
        if reply is None:
            stream.write("client sendto failed\n")
            continue
        stream.write(f"{reply}\n")
        received += 1
    stream.flush()
    return received


def _parse_port(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        print(f"invalid port: {text}", file=sys.stderr)
        return None


def server_main(argv: Sequence[str] | None = None) -> int:
    """Run the UDP echo server: udpserver local-port."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("udpserver local-port")
        return 1
    port = _parse_port(args[0])
    if port is None:
        return 1
    try:
        with UdpServer(port) as server:
            server.serve_forever()
    except ServerError as exc:
        return exc.code
    except KeyboardInterrupt:
        return 0
    return 0


def client_main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive UDP client: udpclient server-ip server-port."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("udpclient server-ip server-port")
        return 1
    port = _parse_port(args[1])
    if port is None:
        return 1
    try:
        client = UdpClient(args[0], port)
    except OSError:
        log(LogLevel.FATAL, "CLIENT SOCKET CREATE FAILED!\n")
        return 1
    with client:
        run_client(client, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(server_main())