"""In-memory filesystem backend — dict-backed, ideal for tests."""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


class MemoryFileSystem:
    """Stores file bodies in a plain dict — nothing touches disk.

    Directories are tracked only so ``make_dirs`` calls can be asserted on;
    writes do not require the parent to exist.
    """

    def __init__(self) -> None:
        self.files: dict[Path, str] = {}
        self.dirs: set[Path] = set()

    async def write_text(self, path: Path, content: str) -> None:
        self.files[path] = content
        log.debug(f"Wrote {path} to memory filesystem")

    async def read_text(self, path: Path) -> str:
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(f"Not found in memory filesystem: {path}") from None

    async def exists(self, path: Path) -> bool:
        return path in self.files

    async def delete(self, path: Path) -> None:
        if path not in self.files:
            raise FileNotFoundError(f"Not found in memory filesystem: {path}")
        del self.files[path]

    async def make_dirs(self, path: Path) -> None:
        self.dirs.add(path)
        self.dirs.update(path.parents)
