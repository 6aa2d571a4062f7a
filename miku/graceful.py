"""Signal-driven shutdown and reload handling for long-running services."""

from __future__ import annotations

import signal
import threading
import time
from typing import Callable

from miku import log

_instance: "Graceful | None" = None
_POLL_SECONDS = 0.05


def _handle_shutdown(signum, frame) -> None:
    if _instance is not None:
        _instance.stop()


def _handle_reload(signum, frame) -> None:
    if _instance is not None and _instance._reload_fn is not None:
        _instance._reload_fn()


_SIGHUP = getattr(signal, "SIGHUP", None)


class Graceful:
    """Stops on SIGTERM or SIGINT and calls a reload hook on SIGHUP.

    Creating one installs the signal handlers; :meth:`cleanup` restores
    the defaults. Only the most recently created instance receives signals.
    """

    def __init__(self, drain_timeout_ms: int = 0) -> None:
        global _instance
        self.drain_timeout_ms = drain_timeout_ms
        self._stopped = threading.Event()
        self._reload_fn: Callable[[], None] | None = None
        _instance = self
        signal.signal(signal.SIGTERM, _handle_shutdown)
        signal.signal(signal.SIGINT, _handle_shutdown)
        if _SIGHUP is not None:
            signal.signal(_SIGHUP, _handle_reload)

    def running(self) -> bool:
        """True until a shutdown has been requested."""
        return not self._stopped.is_set()

    def stop(self) -> None:
        """Request shutdown, as a termination signal would."""
        self._stopped.set()

    def wait(self, on_drain: Callable[[], None] | None = None) -> None:
        """Block until shutdown is requested, run ``on_drain``, then wait the drain timeout."""
        while not self._stopped.wait(_POLL_SECONDS):
            pass
        log.info("Shutdown signal received, draining...")
        if on_drain is not None:
            on_drain()
        if self.drain_timeout_ms > 0:
            time.sleep(self.drain_timeout_ms / 1000)

    def on_reload(self, fn: Callable[[], None] | None) -> None:
        """Set the function called when SIGHUP arrives."""
        self._reload_fn = fn

    def cleanup(self) -> None:
        """Restore default signal handling and detach this instance."""
        global _instance
        signal.signal(signal.SIGTERM, signal.SIG_DFL)
        signal.signal(signal.SIGINT, signal.SIG_DFL)
        if _SIGHUP is not None:
            signal.signal(_SIGHUP, signal.SIG_IGN)
        if _instance is self:
            _instance = None

    def __enter__(self) -> "Graceful":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cleanup()