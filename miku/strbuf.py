"""Growable string builder with doubling capacity."""

from __future__ import annotations

_MIN_CAPACITY = 16


class StringBuilder:
    """Accumulates text; capacity doubles when an append does not fit.

    Capacity counts characters plus one for a terminator, as a C buffer would.
    """

    def __init__(self, init: str | None = None, capacity: int = 0) -> None:
        init = init or ""
        self._parts: list[str] = [init] if init else []
        self._len = len(init)
        self._cap = max(_MIN_CAPACITY, capacity, self._len + 1)

    def _ensure(self, needed: int) -> None:
        if self._cap >= needed:
            return
        new_cap = self._cap * 2
        while new_cap < needed:
            new_cap *= 2
        self._cap = new_cap

    def cat(self, text: str) -> "StringBuilder":
        """Append ``text`` and return the builder."""
        if text:
            self._ensure(self._len + len(text) + 1)
            self._parts.append(text)
            self._len += len(text)
        return self

    def appendf(self, fmt: str, *args) -> "StringBuilder":
        """Append ``fmt % args`` (printf-style formatting)."""
        return self.cat(fmt % args)

    def clear(self) -> None:
        """Empty the builder; the capacity is kept."""
        self._parts.clear()
        self._len = 0

    def capacity(self) -> int:
        """Current capacity, including room for the terminator."""
        return self._cap

    def __len__(self) -> int:
        return self._len

    def __str__(self) -> str:
        if len(self._parts) > 1:
            self._parts = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def __repr__(self) -> str:
        return f"StringBuilder({str(self)!r})"