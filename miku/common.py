"""Shared status codes, byte-order helpers, time and version utilities."""

from __future__ import annotations

import time
from datetime import datetime
from enum import IntEnum

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0
VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

_MASK16 = 0xFFFF
_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF


class Status(IntEnum):
    """Status codes shared across the server."""

    OK = 0
    UNKNOWN = -1
    MEMORY = -2
    INVALID_ARG = -3
    NOT_FOUND = -4
    TIMEOUT = -5
    IO = -6
    PERMISSION = -7
    EXISTS = -8
    BUSY = -9
    OVERFLOW = -10
    PROTOCOL = -11
    DISCONNECT = -12


def _read_be(data: bytes, offset: int, width: int) -> int:
    if offset < 0:
        raise ValueError("offset must not be negative")
    chunk = bytes(data[offset:offset + width])
    if len(chunk) != width:
        raise ValueError(f"need {width} bytes at offset {offset}, got {len(chunk)}")
    return int.from_bytes(chunk, "big")


def read_be16(data: bytes, offset: int = 0) -> int:
    """Read a big-endian unsigned 16-bit integer."""
    return _read_be(data, offset, 2)


def read_be32(data: bytes, offset: int = 0) -> int:
    """Read a big-endian unsigned 32-bit integer."""
    return _read_be(data, offset, 4)


def read_be64(data: bytes, offset: int = 0) -> int:
    """Read a big-endian unsigned 64-bit integer."""
    return _read_be(data, offset, 8)


def pack_be16(value: int) -> bytes:
    """Encode the low 16 bits of ``value`` in network byte order."""
    return (value & _MASK16).to_bytes(2, "big")


def pack_be32(value: int) -> bytes:
    """Encode the low 32 bits of ``value`` in network byte order."""
    return (value & _MASK32).to_bytes(4, "big")


def pack_be64(value: int) -> bytes:
    """Encode the low 64 bits of ``value`` in network byte order."""
    return (value & _MASK64).to_bytes(8, "big")


def bswap32(value: int) -> int:
    """Reverse the byte order of a 32-bit value."""
    return int.from_bytes((value & _MASK32).to_bytes(4, "big"), "little")


def bswap64(value: int) -> int:
    """Reverse the byte order of a 64-bit value."""
    return int.from_bytes((value & _MASK64).to_bytes(8, "big"), "little")


def round_up(value: int, align: int) -> int:
    """Round ``value`` up to a multiple of ``align`` (a power of two)."""
    if align <= 0 or align & (align - 1):
        raise ValueError("align must be a positive power of two")
    return (value + align - 1) & ~(align - 1)


def clamp(value, low, high):
    """Limit ``value`` to the range [low, high]."""
    return max(low, min(value, high))


def timestamp_ms() -> int:
    """Wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def timestamp_us() -> int:
    """Wall-clock time in microseconds since the epoch."""
    return time.time_ns() // 1_000


def _default_build_date() -> str:
    now = datetime.now()
    return f"{now:%b} {now.day:2d} {now:%Y %H:%M:%S}"


def version_full(git_hash: str = "unknown", build_date: str | None = None) -> str:
    """Full version string: ``miku <version> (<hash>, <date>)``."""
    if build_date is None:
        build_date = _default_build_date()
    return f"miku {VERSION} ({git_hash}, {build_date})"