"""Open-addressing string-keyed hash map (FNV-1a, linear probing)."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from miku.checksum import fnv1a_64

_DELETED = object()
_MIN_CAPACITY = 16


class HashMap:
    """Hash map keyed by strings, with tombstone deletion.

    ``on_free`` is called with a value when it is replaced, deleted or
    cleared, unless the value is None. The table doubles once it is
    three-quarters full.
    """

    def __init__(self, initial_cap: int = _MIN_CAPACITY,
                 on_free: Callable[[Any], None] | None = None) -> None:
        cap = _MIN_CAPACITY
        while cap < initial_cap:
            cap *= 2
        self._slots: list = [None] * cap
        self._count = 0
        self._on_free = on_free

    @staticmethod
    def _check_key(key) -> None:
        if not isinstance(key, str):
            raise TypeError("hash map keys must be str")

    def _probe(self, key: str) -> Iterator[int]:
        mask = len(self._slots) - 1
        start = fnv1a_64(key) & mask
        for step in range(len(self._slots)):
            yield (start + step) & mask

    def _find(self, key: str) -> int | None:
        for i in self._probe(key):
            slot = self._slots[i]
            if slot is None:
                return None
            if slot is not _DELETED and slot[0] == key:
                return i
        return None

    def _release(self, value) -> None:
        if self._on_free is not None and value is not None:
            self._on_free(value)

    def _resize(self) -> None:
        entries = [slot for slot in self._slots if slot is not None and slot is not _DELETED]
        self._slots = [None] * (len(self._slots) * 2)
        for entry in entries:
            for i in self._probe(entry[0]):
                if self._slots[i] is None:
                    self._slots[i] = entry
                    break

    def put(self, key: str, value) -> None:
        """Insert or replace the value for ``key``."""
        self._check_key(key)
        if self._count * 4 >= len(self._slots) * 3:
            self._resize()
        i = self._find(key)
        if i is not None:
            old = self._slots[i][1]
            self._slots[i] = (key, value)
            self._release(old)
            return
        for i in self._probe(key):
            slot = self._slots[i]
            if slot is None or slot is _DELETED:
                self._slots[i] = (key, value)
                self._count += 1
                return

    def get(self, key: str, default=None):
        """Value for ``key``, or ``default`` if absent."""
        self._check_key(key)
        i = self._find(key)
        return default if i is None else self._slots[i][1]

    def delete(self, key: str) -> None:
        """Remove ``key``; raise KeyError if it is absent."""
        self._check_key(key)
        i = self._find(key)
        if i is None:
            raise KeyError(key)
        old = self._slots[i][1]
        self._slots[i] = _DELETED
        self._count -= 1
        self._release(old)

    def items(self) -> Iterator[tuple[str, Any]]:
        """Yield (key, value) pairs in table order."""
        for slot in self._slots:
            if slot is not None and slot is not _DELETED:
                yield slot

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def clear(self) -> None:
        """Remove every entry, releasing each value."""
        values = [value for _, value in self.items()]
        self._slots = [None] * len(self._slots)
        self._count = 0
        for value in values:
            self._release(value)