"""SHA-1 message digest."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_K = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)
_INITIAL = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _compress(state: list[int], block: bytes) -> None:
    w = list(struct.unpack(">16I", block))
    for t in range(16, 80):
        w.append(_rotl(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16], 1))

    a, b, c, d, e = state
    for t, word in enumerate(w):
        if t < 20:
            f = (b & c) ^ (~b & d)
            k = _K[0]
        elif t < 40:
            f = b ^ c ^ d
            k = _K[1]
        elif t < 60:
            f = (b & c) ^ (b & d) ^ (c & d)
            k = _K[2]
        else:
            f = b ^ c ^ d
            k = _K[3]
        tmp = (_rotl(a, 5) + (f & _MASK32) + e + k + word) & _MASK32
        a, b, c, d, e = tmp, a, _rotl(b, 30), c, d

    for i, value in enumerate((a, b, c, d, e)):
        state[i] = (state[i] + value) & _MASK32


def sha1(data) -> bytes:
    """Return the 20-byte SHA-1 digest of ``data``."""
    message = bytes(data)
    bitlen = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    padding = b"\x80" + b"\x00" * ((55 - len(message)) % 64)
    message += padding + struct.pack(">Q", bitlen)

    state = list(_INITIAL)
    view = memoryview(message)
    for start in range(0, len(message), 64):
        _compress(state, bytes(view[start:start + 64]))
    return struct.pack(">5I", *state)