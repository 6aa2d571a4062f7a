"""Foundation toolkit for an instant-messaging server: checksums, codecs, memory pools, containers, logging, configuration and service discovery."""

__version__ = "0.1.0"