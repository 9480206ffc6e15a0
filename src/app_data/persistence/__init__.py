"""Pluggable filesystem backends for the key-value store."""

from __future__ import annotations

from app_data.persistence.file_backend import LocalFileSystem
from app_data.persistence.memory_backend import MemoryFileSystem
from app_data.persistence.protocols import IFileSystem

__all__ = ["IFileSystem", "LocalFileSystem", "MemoryFileSystem"]
