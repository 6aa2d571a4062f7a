"""FNV-1a 64-bit hash and CRC-32 checksum."""

from __future__ import annotations

_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211
_MASK64 = 0xFFFFFFFFFFFFFFFF
_MASK32 = 0xFFFFFFFF


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def fnv1a_64(data) -> int:
    """FNV-1a 64-bit hash of ``data`` (bytes-like, or str as UTF-8)."""
    h = _FNV_OFFSET
    for byte in _as_bytes(data):
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK64
    return h


def _make_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        c = i
        for _ in range(8):
            c = (0xEDB88320 ^ (c >> 1)) if c & 1 else (c >> 1)
        table.append(c)
    return tuple(table)


_CRC_TABLE = _make_table()


def crc32_update(crc: int, data) -> int:
    """Continue a CRC-32 computation from ``crc`` over ``data``."""
    crc = ~crc & _MASK32
    for byte in _as_bytes(data):
        crc = _CRC_TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return ~crc & _MASK32


def crc32(data) -> int:
    """CRC-32 (IEEE 802.3) of ``data``."""
    return crc32_update(0, data)