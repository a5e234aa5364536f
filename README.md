# echolab

A small collection of networking and data-structure tools:

- a TCP echo server and an interactive client (`echolab.tcp`);
- a UDP echo server and an interactive client (`echolab.udp`);
- a thread-safe logger that writes to the screen or appends to a file (`echolab.log`);
- singly and doubly linked lists (`echolab.singly_linked`, `echolab.doubly_linked`);
- bubble sort and selection sort (`echolab.sorting`).

It needs Python 3.10 or later and has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Echo servers and clients

Start a TCP echo server on a local port. It accepts connections one at a
time, prints each message it receives as `[ip:port]# message`, and replies
with `echo# ` followed by the message:

```
echolab-tcp-server 8888
```

Connect to it and type lines at the `Say # ` prompt. Each reply is shown as
`SERVER ECHO# ...`; type `quit` to leave:

```
echolab-tcp-client 127.0.0.1 8888
```

The UDP pair works the same way. The server replies to each datagram with
`[server]# ` followed by the message; the client prompts with `you say# `
and prints each line it reads before sending it:

```
echolab-udp-server 8888
echolab-udp-client 127.0.0.1 8888
```

Given the wrong number of arguments, each command prints its usage and exits.
If a server cannot create or bind (or, for TCP, listen on) its socket, it
exits with status 1, 2 or 3 respectively. Stop a server with Ctrl-C.

The servers and clients can also be used from code. `TcpServer` and
`UdpServer` open their socket on entering a `with` block (raising
`ServerError`, whose `code` holds the exit status, on failure) and close it on
leaving; `serve_forever()` runs until `stop()` is called from another thread.
Pass port `0` to let the system choose one, and read it from `address`:

```python
import threading
from echolab.tcp import TcpServer, TcpClient

with TcpServer(0, host="127.0.0.1") as server:
    threading.Thread(target=server.serve_forever, daemon=True).start()
    with TcpClient("127.0.0.1", server.address[1], timeout=5) as client:
        print(client.send("hello"))   # echo# hello
    server.stop()
```

`TcpClient.send` raises `ValueError` for an empty line. `UdpClient.send`
returns `None` when nothing could be sent and raises `OSError` when no reply
could be received. `run_client(client, lines, out)` in either module drives
the prompt-and-reply loop over any iterable of lines.

## Logging

```python
from echolab.log import LogLevel, log, enable_file, enable_screen

log(LogLevel.INFO, "listening on port %d\n", 8888)
enable_file()      # append to ./log.txt from now on
log(LogLevel.WARNING, "disk almost full\n")
enable_screen()
```

Each record has the form
`[LEVEL][pid][file][line][YYYY-MM-DD HH:MM:SS] message`, where file and line
are those of the caller. No newline is added, so end the format string with
one. Levels outside `LogLevel` are written as `UNKNOWN`. A `Logger` can be
created with its own log file path, output type (`OutputType.SCREEN` or
`OutputType.FILE`) and stream; `Logger.log` returns the `LogMessage` it wrote.

## Lists and sorting

```python
from echolab.doubly_linked import DoublyLinkedList
from echolab.sorting import bubble_sort, selection_sort, format_values

items = DoublyLinkedList([1, 2, 3, 2])
items.change_all(2, 99)
print(items.format())          # "1 99 3 99 "
print(list(reversed(items)))   # [99, 3, 99, 1]

print(format_values(selection_sort([9, 1, 10, 6, 32])))
```

`SinglyLinkedList` offers the same operations apart from `front`, `back` and
reversal. `delete_one` and `change_one` report whether a matching value was
found; `delete_all` and `change_all` return how many values were affected.
`front()` and `back()` raise `IndexError` on an empty list. The sorting
functions return a new list and leave their input unchanged.

The `echolab-sort` command sorts the integers given to it, or a sample list
when none are given, and prints them. `--algorithm` chooses `bubble` (the
default) or `selection`:

```
echolab-sort
echolab-sort --algorithm selection 5 -3 12 0
```

## Limitations

The servers handle one client at a time: a TCP client is served until it
disconnects before the next connection is accepted. Messages are read in
chunks of at most 1023 bytes with no framing, and nothing is encrypted or
authenticated. The logger has no level filtering or log rotation.