"""Random (version 4 layout) UUID generation from a time-seeded LCG."""

from __future__ import annotations

import time
import uuid

_MASK32 = 0xFFFFFFFF


def generate_uuid_bytes() -> bytes:
    """Return 16 bytes with the version-4 and RFC 4122 variant bits set."""
    now = time.time_ns()
    seconds, nanos = divmod(now, 1_000_000_000)
    marker = object()
    seed = (nanos ^ seconds ^ id(marker)) & _MASK32
    out = bytearray()
    for _ in range(16):
        seed = (seed * 1103515245 + 12345) & _MASK32
        out.append((seed >> 16) & 0xFF)
    out[6] = (out[6] & 0x0F) | 0x40
    out[8] = (out[8] & 0x3F) | 0x80
    return bytes(out)


def generate_uuid() -> str:
    """Return a lowercase hyphenated 36-character UUID string."""
    return str(uuid.UUID(bytes=generate_uuid_bytes()))