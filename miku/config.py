"""Key/value configuration read from a small indentation-based YAML subset."""

from __future__ import annotations

import os
import re

_MAX_DEPTH = 32
_PATH_LIMIT = 511
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _count_indent(line: str) -> int:
    spaces = len(line) - len(line.lstrip(" "))
    if line[spaces:spaces + 1] == "\t":
        return 0
    return spaces // 2


def _join_path(keys: list[str]) -> str:
    path = ""
    for i, key in enumerate(keys):
        if i > 0 and len(path) < _PATH_LIMIT:
            path += "."
        if len(path) + len(key) >= _PATH_LIMIT:
            break
        path += key
    return path


class Config:
    """Flat store of dotted keys such as ``rpc.auth.port``.

    Nested mappings use two-space indentation; only leaf values are stored.
    """

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def load_file(self, path: str | os.PathLike) -> None:
        """Merge the settings in the file at ``path``; raise OSError if unreadable."""
        with open(path, encoding="utf-8", errors="replace") as handle:
            self.load_string(handle.read())

    def load_string(self, text: str) -> None:
        """Merge the settings in ``text``.

        Raises ValueError when a line is nested deeper than any parent
        seen before it.
        """
        stack: list[str | None] = [None] * _MAX_DEPTH
        for line in text.split("\n"):
            stripped = line.lstrip(" \t")
            if not stripped or stripped[0] in "#\r":
                continue
            depth = min(_count_indent(line), _MAX_DEPTH - 1)
            key, sep, value = stripped.partition(":")
            if not sep:
                continue
            key = key.rstrip("\n\r \t")
            value = value.lstrip(" ").rstrip("\n\r \t")
            stack[depth] = key
            if not value:
                continue
            if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
                value = value[1:-1]
            parents = stack[:depth + 1]
            if any(part is None for part in parents):
                raise ValueError(f"key {key!r} is indented without a parent key")
            path = _join_path(parents)
            if path:
                self.set(path, value)

    def get(self, key: str) -> str | None:
        """Raw value for ``key``, or None."""
        return self._values.get(key)

    def get_int(self, key: str, default: int = 0) -> int:
        """Leading integer of the value (0 if it has none), or ``default`` if unset."""
        value = self.get(key)
        if value is None:
            return default
        match = _INT_PREFIX.match(value)
        if not match:
            return 0
        return max(_INT64_MIN, min(int(match.group(1)), _INT64_MAX))

    def get_str(self, key: str, default: str | None = None) -> str | None:
        """Value for ``key``, or ``default`` if unset."""
        value = self.get(key)
        return default if value is None else value

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        if key is None:
            return
        if not isinstance(value, str):
            raise TypeError("config values must be str")
        self._values[key] = value