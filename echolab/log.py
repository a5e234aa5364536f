"""Thread-safe logger that writes records to the screen or appends them to a file."""

from __future__ import annotations

import enum
import os
import sys
import threading
import time
from dataclasses import dataclass
from types import FrameType
from typing import TextIO

__all__ = [
    "LogLevel",
    "OutputType",
    "LogMessage",
    "Logger",
    "DEFAULT_LOGFILE",
    "level_to_string",
    "current_time",
    "log",
    "enable_screen",
    "enable_file",
]

DEFAULT_LOGFILE = "./log.txt"
_MAX_INFO = 1023
_MAX_RECORD = 2047

_lock = threading.Lock()


class LogLevel(enum.IntEnum):
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5


class OutputType(enum.IntEnum):
    SCREEN = 1
    FILE = 2


def level_to_string(level: int) -> str:
    """Name of a log level, or "UNKNOWN" for a value outside the known levels."""
    try:
        return LogLevel(level).name
    except ValueError:
        return "UNKNOWN"


def current_time() -> str:
    """Local time as "YYYY-MM-DD HH:MM:SS"."""
    now = time.localtime()
    return (
        f"{now.tm_year}-{now.tm_mon:02d}-{now.tm_mday:02d} "
        f"{now.tm_hour:02d}:{now.tm_min:02d}:{now.tm_sec:02d}"
    )


@dataclass
class LogMessage:
    level: str
    pid: int
    filename: str
    line: int
    time: str
    info: str

    def render(self) -> str:
        return f"[{self.level}][{self.pid}][{self.filename}][{self.line}][{self.time}] {self.info}"


class Logger:
    """Writes log records to standard output or appends them to a log file."""

    def __init__(
        self,
        logfile: str | os.PathLike[str] = DEFAULT_LOGFILE,
        output_type: int = OutputType.SCREEN,
        stream: TextIO | None = None,
    ) -> None:
        self.logfile = logfile
        self.output_type = output_type
        self.stream = stream

    def enable(self, output_type: int) -> None:
        self.output_type = output_type

    def flush_to_screen(self, message: LogMessage) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(message.render())
        stream.flush()

    def flush_to_file(self, message: LogMessage) -> None:
        record = message.render()[:_MAX_RECORD]
        try:
            with open(self.logfile, "a", encoding="utf-8") as out:
                out.write(record)
        except OSError:
            return

    def flush(self, message: LogMessage) -> None:
        with _lock:
            if self.output_type == OutputType.SCREEN:
                self.flush_to_screen(message)
            elif self.output_type == OutputType.FILE:
                self.flush_to_file(message)

    def log(self, level: int, fmt: str, *args: object) -> LogMessage:
        """Format a record with printf-style arguments, emit it, and return it."""
        return self._record(level, fmt, args, sys._getframe(1))

    def _record(
        self, level: int, fmt: str, args: tuple[object, ...], frame: FrameType | None
    ) -> LogMessage:
        info = fmt % args if args else fmt
        message = LogMessage(
            level=level_to_string(level),
            pid=os.getpid(),
            filename=frame.f_code.co_filename if frame is not None else "",
            line=frame.f_lineno if frame is not None else 0,
            time=current_time(),
            info=info[:_MAX_INFO],
        )
        self.flush(message)
        return message


_default_logger = Logger()


def log(level: int, fmt: str, *args: object) -> LogMessage:
    """Log through the shared module logger."""
    return _default_logger._record(level, fmt, args, sys._getframe(1))


def enable_screen() -> None:
    _default_logger.enable(OutputType.SCREEN)


def enable_file() -> None:
    _default_logger.enable(OutputType.FILE)