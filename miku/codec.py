"""Standard Base64 encoding and decoding with padding."""

from __future__ import annotations

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_VALUES = {ch: i for i, ch in enumerate(_ALPHABET)}


def b64encode(data) -> str:
    """Encode bytes-like ``data`` as padded Base64 text."""
    raw = bytes(data)
    out = []
    for start in range(0, len(raw), 3):
        chunk = raw[start:start + 3]
        n = int.from_bytes(chunk.ljust(3, b"\x00"), "big")
        out.append(_ALPHABET[(n >> 18) & 0x3F])
        out.append(_ALPHABET[(n >> 12) & 0x3F])
        out.append(_ALPHABET[(n >> 6) & 0x3F] if len(chunk) > 1 else "=")
        out.append(_ALPHABET[n & 0x3F] if len(chunk) > 2 else "=")
    return "".join(out)


def _value(ch: str) -> int:
    try:
        return _VALUES[ch]
    except KeyError:
        raise ValueError(f"invalid Base64 character {ch!r}") from None


def b64decode(text) -> bytes:
    """Decode padded Base64 ``text`` (str or ASCII bytes).

    Raises ValueError when the length is not a multiple of four or the
    input holds characters or padding that Base64 does not allow.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        text = bytes(text).decode("ascii", errors="replace")
    if len(text) % 4:
        raise ValueError("Base64 input length must be a multiple of 4")

    out = bytearray()
    last = len(text) - 4
    for start in range(0, len(text), 4):
        a, b, c, d = text[start:start + 4]
        if (c == "=" or d == "=") and start != last:
            raise ValueError("padding allowed only at the end")
        if c == "=" and d != "=":
            raise ValueError("malformed Base64 padding")
        n = (_value(a) << 18) | (_value(b) << 12)
        if c != "=":
            n |= _value(c) << 6
        if d != "=":
            n |= _value(d)
        out.append((n >> 16) & 0xFF)
        if c != "=":
            out.append((n >> 8) & 0xFF)
        if d != "=":
            out.append(n & 0xFF)
    return bytes(out)