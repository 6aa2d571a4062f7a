"""Error value carrying a status code and a message."""

from __future__ import annotations

from miku.common import Status

MESSAGE_LIMIT = 255


class MikuError(Exception):
    """An error with a numeric code and a message of at most 255 characters."""

    def __init__(self, code: int = Status.OK, message: str = "") -> None:
        self.code = code
        self._message = (message or "")[:MESSAGE_LIMIT]
        super().__init__(self.message())

    @classmethod
    def ok(cls) -> "MikuError":
        """A value that signals success."""
        return cls(Status.OK, "")

    def is_ok(self) -> bool:
        """True when the code is ``Status.OK``."""
        return self.code == Status.OK

    def message(self) -> str:
        """The message, or ``"ok"`` when there is none."""
        return self._message or "ok"

    def __str__(self) -> str:
        return self.message()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={int(self.code)}, message={self._message!r})"