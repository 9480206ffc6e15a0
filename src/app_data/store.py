"""Keyed JSON store: one UTF-8 JSON file per key under the app-data directory.

Layout on disk::

    <app-data-root>/<app-name>/data/<key>.json

Reads and writes go through an :class:`IFileSystem`; an optional
:class:`InMemoryMirror` short-circuits repeated reads. There is no locking:
concurrent writers to the same key race and the last completed write wins,
and :meth:`KeyedJSONStore.add_to_array` may lose updates under concurrency.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from app_data.config import StoreSettings
from app_data.exceptions import (
    ConfigurationError,
    SerializationError,
    StorageError,
    TypeMismatchError,
)
from app_data.mirror import InMemoryMirror
from app_data.paths import key_path, storage_root, user_app_data_dir
from app_data.persistence.file_backend import LocalFileSystem
from app_data.persistence.protocols import IFileSystem

log = logging.getLogger(__name__)


@dataclass
class StoreState:
    """Mutable per-store configuration: namespace plus mirror."""

    app_name: Optional[str] = None
    mirror: InMemoryMirror = field(default_factory=InMemoryMirror)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class KeyedJSONStore:
    """Persist JSON-compatible values under string keys.

    ``None`` is the single "no value" marker: writing ``None`` deletes the
    key, and a missing file, an empty file or stored JSON ``null`` all read
    back as ``None``.
    """

    def __init__(
        self,
        settings: StoreSettings | None = None,
        filesystem: IFileSystem | None = None,
        state: StoreState | None = None,
    ) -> None:
        self._settings = settings or StoreSettings()
        self._fs: IFileSystem = filesystem or LocalFileSystem()
        self._state = state or StoreState(
            app_name=self._settings.app_name,
            mirror=InMemoryMirror(enabled=self._settings.in_memory_cache),
        )

    # ── Configuration ────────────────────────────────────────────────

    @property
    def app_name(self) -> Optional[str]:
        return self._state.app_name

    @property
    def in_memory_cache_enabled(self) -> bool:
        return self._state.mirror.enabled

    def set_app_name(self, name: str) -> None:
        self._state.app_name = name
        log.info(f"Application name set to {name!r}")

    def enable_in_memory_cache(self) -> None:
        if self._state.mirror.enable():
            log.info("In-memory cache enabled")

    def disable_in_memory_cache(self) -> None:
        if self._state.mirror.disable():
            log.info("In-memory cache disabled")

    # ── Paths ────────────────────────────────────────────────────────

    def _require_app_name(self, action: str) -> str:
        if not self._state.app_name:
            raise ConfigurationError(f"Cannot {action}: application name not set")
        return self._state.app_name

    def _app_data_dir(self) -> Path:
        if self._settings.root_dir is not None:
            return self._settings.root_dir
        return user_app_data_dir(legacy_darwin_path=self._settings.legacy_darwin_path)

    def storage_root(self) -> Path:
        """Directory holding every key file for the current application."""
        app_name = self._require_app_name("resolve storage directory")
        return storage_root(self._app_data_dir(), app_name)

    def path_for(self, key: str) -> Path:
        """File that backs ``key``."""
        return key_path(self.storage_root(), key)

    # ── Raw text access ──────────────────────────────────────────────

    async def write(self, key: str, content: Optional[str]) -> None:
        """Write ``content`` verbatim; ``None`` removes the key instead."""
        self._require_app_name("write data")
        if content is None:
            await self.remove(key)
            return

        root = self.storage_root()
        path = key_path(root, key)
        try:
            await self._fs.make_dirs(root)
            await self._fs.write_text(path, content)
        except OSError as e:
            raise StorageError(f"Failed to write {key!r} to {path}: {e}") from e

        self._state.mirror.put(key, content)
        log.debug(f"Saved {key} to {path}")

    async def read(self, key: str) -> Optional[str]:
        """Return the raw text stored under ``key``, or None if absent or empty."""
        self._require_app_name("read data")
        mirror = self._state.mirror
        if key in mirror:
            return mirror.lookup(key) or None

        path = self.path_for(key)
        try:
            if not await self._fs.exists(path):
                return None
            content = await self._fs.read_text(path)
        except FileNotFoundError:
            log.warning(f"{path} disappeared between existence check and read")
            return None
        except UnicodeDecodeError as e:
            raise SerializationError(f"Stored data for {key!r} is not valid UTF-8: {e}", key=key) from e
        except OSError as e:
            raise StorageError(f"Failed to read {key!r} from {path}: {e}") from e

        if not content:
            return None
        log.debug(f"Loaded {key} from {path}")
        return content

    async def remove(self, key: str) -> None:
        """Delete ``key``. Missing keys are a no-op."""
        self._require_app_name("remove data")
        path = self.path_for(key)
        try:
            if not await self._fs.exists(path):
                return
            await self._fs.delete(path)
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError(f"Failed to remove {key!r} at {path}: {e}") from e

        self._state.mirror.discard(key)
        log.debug(f"Removed {key} ({path})")

    # ── JSON values ──────────────────────────────────────────────────

    async def save(self, key: str, value: Any) -> None:
        """Serialize ``value`` to compact JSON and write it; ``None`` removes the key."""
        if value is None:
            await self.remove(key)
            return
        try:
            content = json.dumps(value, ensure_ascii=False, allow_nan=False, separators=(",", ":"))
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Cannot serialize value for {key!r}: {e}", key=key) from e
        await self.write(key, content)

    async def set(self, key: str, value: Any) -> None:
        """Alias of :meth:`save`."""
        await self.save(key, value)

    async def get(self, key: str) -> Any:
        """Return the parsed JSON value under ``key``, or None."""
        content = await self.read(key)
        if not content:
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise SerializationError(
                f"Stored data for {key!r} is not valid JSON: {e}", key=key, raw=content
            ) from e

    # ── Array helpers ────────────────────────────────────────────────

    async def get_array(self, key: str) -> list[Any]:
        value = await self.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            raise TypeMismatchError(
                f"Expected an array, got {_json_type(value)} under key {key!r}", key=key
            )
        return value

    async def add_to_array(self, key: str, item: Any) -> None:
        """Append ``item`` to the array under ``key``, creating it if needed.

        Read-modify-write without locking: concurrent appends to the same
        key can drop items.
        """
        array = await self.get_array(key)
        array.append(item)
        await self.save(key, array)
