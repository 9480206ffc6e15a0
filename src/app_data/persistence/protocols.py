"""Filesystem protocol — the primitives the store is built on."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class IFileSystem(Protocol):
    """Async filesystem primitives (local disk, in-memory, etc.).

    Missing files surface as ``FileNotFoundError``; every other failure is
    an ``OSError`` subclass.
    """

    async def write_text(self, path: Path, content: str) -> None:
        """Write ``content`` as UTF-8, replacing any existing file."""
        ...

    async def read_text(self, path: Path) -> str:
        """Read a UTF-8 file. Raises FileNotFoundError if missing."""
        ...

    async def exists(self, path: Path) -> bool:
        """Check whether anything exists at ``path`` (a directory counts)."""
        ...

    async def delete(self, path: Path) -> None:
        """Delete a file. Raises FileNotFoundError if missing."""
        ...

    async def make_dirs(self, path: Path) -> None:
        """Create ``path`` and any missing parents (idempotent)."""
        ...
