"""Exception hierarchy for app-data."""

from __future__ import annotations


class AppDataError(Exception):
    """Base exception for all app-data errors."""


class ConfigurationError(AppDataError):
    """Raised when the store is used before the application name is set."""


class StorageError(AppDataError, OSError):
    """Filesystem failure other than not-found (permissions, I/O)."""


class SerializationError(AppDataError):
    """A value could not be encoded to, or decoded from, JSON text."""

    def __init__(self, message: str, key: str = "", raw: str = "") -> None:
        super().__init__(message)
        self.key = key
        self.raw = raw


class TypeMismatchError(AppDataError):
    """Array helpers were used on a key that does not hold a JSON array."""

    def __init__(self, message: str, key: str = "") -> None:
        super().__init__(message)
        self.key = key


__all__ = [
    "AppDataError",
    "ConfigurationError",
    "StorageError",
    "SerializationError",
    "TypeMismatchError",
]
