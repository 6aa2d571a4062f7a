"""Thread-safe request, connection and traffic counters for a service."""

from __future__ import annotations

import threading
from dataclasses import dataclass

from miku.common import timestamp_ms

_NAME_LIMIT = 63


@dataclass(frozen=True)
class StatsSnapshot:
    """Counter values read at one moment."""

    requests_total: int
    requests_failed: int
    connections_active: int
    connections_total: int
    bytes_sent: int
    bytes_recv: int
    uptime_ms: int
    service_name: str
    port: int


class Stats:
    """Counters for one service, started at creation time."""

    def __init__(self, service_name: str, port: int) -> None:
        self.service_name = service_name[:_NAME_LIMIT]
        self.port = port
        self.start_time_ms = timestamp_ms()
        self._lock = threading.Lock()
        self.requests_total = 0
        self.requests_failed = 0
        self.connections_active = 0
        self.connections_total = 0
        self.bytes_sent = 0
        self.bytes_recv = 0

    def request_inc(self) -> None:
        """Count one request."""
        with self._lock:
            self.requests_total += 1

    def fail_inc(self) -> None:
        """Count one failed request."""
        with self._lock:
            self.requests_failed += 1

    def conn_open(self) -> None:
        """Count a new connection."""
        with self._lock:
            self.connections_active += 1
            self.connections_total += 1

    def conn_close(self) -> None:
        """Count a closed connection."""
        with self._lock:
            self.connections_active -= 1

    def add_bytes_sent(self, n: int) -> None:
        """Add ``n`` to the bytes sent."""
        with self._lock:
            self.bytes_sent += n

    def add_bytes_recv(self, n: int) -> None:
        """Add ``n`` to the bytes received."""
        with self._lock:
            self.bytes_recv += n

    def uptime_ms(self) -> int:
        """Milliseconds since creation."""
        return timestamp_ms() - self.start_time_ms

    def snapshot(self) -> StatsSnapshot:
        """Copy of all counters plus the current uptime."""
        with self._lock:
            return StatsSnapshot(
                requests_total=self.requests_total,
                requests_failed=self.requests_failed,
                connections_active=self.connections_active,
                connections_total=self.connections_total,
                bytes_sent=self.bytes_sent,
                bytes_recv=self.bytes_recv,
                uptime_ms=self.uptime_ms(),
                service_name=self.service_name,
                port=self.port,
            )