"""Local-disk filesystem backend."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

log = logging.getLogger(__name__)


class LocalFileSystem:
    """Real filesystem access; each blocking call runs in a worker thread."""

    async def write_text(self, path: Path, content: str) -> None:
        await asyncio.to_thread(path.write_text, content, encoding="utf-8")
        log.debug(f"Wrote {len(content)} chars to {path}")

    async def read_text(self, path: Path) -> str:
        return await asyncio.to_thread(path.read_text, encoding="utf-8")

    async def exists(self, path: Path) -> bool:
        return await asyncio.to_thread(path.exists)

    async def delete(self, path: Path) -> None:
        await asyncio.to_thread(path.unlink)
        log.debug(f"Deleted {path}")

    async def make_dirs(self, path: Path) -> None:
        await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
