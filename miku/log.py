"""Leveled logging to stderr (coloured) and an optional rotating file."""

from __future__ import annotations

import os
import sys
import threading
import time
from enum import IntEnum
from typing import TextIO


class LogLevel(IntEnum):
    """Severity levels, lowest first."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


_COLORS = {
    LogLevel.TRACE: "\033[37m",
    LogLevel.DEBUG: "\033[36m",
    LogLevel.INFO: "\033[32m",
    LogLevel.WARN: "\033[33m",
    LogLevel.ERROR: "\033[31m",
    LogLevel.FATAL: "\033[35m",
}
_RESET = "\033[0m"
_WRITE_ESTIMATE = 256


class _State:
    def __init__(self) -> None:
        self.level = LogLevel.INFO
        self.file: TextIO | None = None
        self.initialized = False
        self.path = ""
        self.max_bytes = 10 * 1024 * 1024
        self.max_files = 5
        self.written = 0
        self.lock = threading.Lock()


_state = _State()


def init(log_dir: str | os.PathLike | None = None, min_level: int = LogLevel.INFO) -> None:
    """Set the minimum level and open ``<log_dir>/miku.log``; repeated calls do nothing."""
    with _state.lock:
        if _state.initialized:
            return
        _state.level = LogLevel(min_level)
        if log_dir:
            _state.path = os.path.join(os.fspath(log_dir), "miku.log")
            try:
                _state.file = open(_state.path, "a", encoding="utf-8")
            except OSError:
                _state.file = None
        _state.initialized = True


def shutdown() -> None:
    """Close the log file and allow a later :func:`init`."""
    with _state.lock:
        if _state.file is not None:
            _state.file.close()
            _state.file = None
        _state.initialized = False


def set_level(level: int) -> None:
    """Change the minimum level that is written."""
    _state.level = LogLevel(level)


def set_rotation(max_bytes: int, max_files: int) -> None:
    """Rotate after about ``max_bytes`` written, keeping ``max_files`` backups."""
    _state.max_bytes = max_bytes
    _state.max_files = max_files


def _rotate() -> None:
    if _state.file is None or _state.max_files <= 0:
        return
    _state.file.close()
    _state.file = None
    for i in range(_state.max_files - 1, 0, -1):
        try:
            os.replace(f"{_state.path}.{i}", f"{_state.path}.{i + 1}")
        except OSError:
            pass
    try:
        os.replace(_state.path, f"{_state.path}.1")
    except OSError:
        pass
    try:
        _state.file = open(_state.path, "a", encoding="utf-8")
    except OSError:
        _state.file = None
    _state.written = 0


def _emit(level: int, message: str, depth: int) -> None:
    level = LogLevel(level)
    if level < _state.level:
        return
    frame = sys._getframe(depth)
    source = f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
    stamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    with _state.lock:
        sys.stderr.write(
            f"{_COLORS[level]}[{level.name}]{_RESET} [{stamp}] {source}: {message}\n"
        )
        sys.stderr.flush()
        if _state.file is not None:
            _state.file.write(f"[{level.name}] [{stamp}] {source}: {message}\n")
            _state.file.flush()
            _state.written += _WRITE_ESTIMATE
            if _state.written >= _state.max_bytes:
                _rotate()


def write(level: int, message: str) -> None:
    """Log ``message`` at ``level``, tagged with the caller's file and line."""
    _emit(level, message, 2)


def trace(message: str) -> None:
    """Log at TRACE level."""
    _emit(LogLevel.TRACE, message, 2)


def debug(message: str) -> None:
    """Log at DEBUG level."""
    _emit(LogLevel.DEBUG, message, 2)


def info(message: str) -> None:
    """Log at INFO level."""
    _emit(LogLevel.INFO, message, 2)


def warn(message: str) -> None:
    """Log at WARN level."""
    _emit(LogLevel.WARN, message, 2)


def error(message: str) -> None:
    """Log at ERROR level."""
    _emit(LogLevel.ERROR, message, 2)


def fatal(message: str) -> None:
    """Log at FATAL level."""
    _emit(LogLevel.FATAL, message, 2)