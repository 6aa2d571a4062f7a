"""In-process service registry keyed by service name."""

from __future__ import annotations

from dataclasses import dataclass, replace

from miku import log

_ENDPOINTS_LIMIT = 511
_NAME_LIMIT = 63
_HOST_LIMIT = 127


@dataclass
class ServiceEntry:
    """One registered service instance."""

    name: str
    host: str
    port: int
    lease_id: int


class Discovery:
    """Registry of services; registering a known name updates its entry."""

    def __init__(self, endpoints: str) -> None:
        if endpoints is None:
            raise ValueError("endpoints are required")
        self.endpoints = endpoints[:_ENDPOINTS_LIMIT]
        self._entries: list[ServiceEntry] = []

    def register(self, service_name: str, host: str, port: int, ttl_sec: int = 0) -> None:
        """Add ``service_name`` at ``host:port``, or update it if already present."""
        if service_name is None or host is None:
            raise ValueError("service name and host are required")
        name = service_name[:_NAME_LIMIT]
        host = host[:_HOST_LIMIT]
        for entry in self._entries:
            if entry.name == name:
                entry.host = host
                entry.port = port
                entry.lease_id = ttl_sec
                log.info(f"Service updated: {service_name} -> {host}:{port}")
                return
        self._entries.append(ServiceEntry(name, host, port, ttl_sec))
        log.info(f"Service registered: {service_name} -> {host}:{port}")

    def deregister(self, service_name: str) -> None:
        """Remove ``service_name``; raise KeyError if it is not registered."""
        for i, entry in enumerate(self._entries):
            if entry.name == service_name:
                del self._entries[i]
                log.info(f"Service deregistered: {service_name}")
                return
        raise KeyError(service_name)

    def resolve(self, service_name: str, max_entries: int = 16) -> list[ServiceEntry]:
        """Copies of at most ``max_entries`` entries registered under ``service_name``."""
        found = [replace(e) for e in self._entries if e.name == service_name]
        return found[:max(max_entries, 0)]

    def heartbeat(self) -> None:
        """Keep registrations alive; entries here do not expire."""
        return None