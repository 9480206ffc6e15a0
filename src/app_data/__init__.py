"""app-data: per-application JSON key-value persistence.

Instance API::

    from app_data import KeyedJSONStore

    store = KeyedJSONStore()
    store.set_app_name("demoapp")
    await store.save("prefs", {"theme": "dark"})
    await store.get("prefs")

Module API (process-wide default store)::

    import app_data

    app_data.set_app_name("demoapp")
    app_data.enable_in_memory_cache()
    await app_data.add_to_array("history", {"q": "hello"})
"""

from __future__ import annotations

from typing import Any, Optional

from app_data.config import StoreSettings
from app_data.exceptions import (
    AppDataError,
    ConfigurationError,
    SerializationError,
    StorageError,
    TypeMismatchError,
)
from app_data.mirror import InMemoryMirror
from app_data.paths import user_app_data_dir
from app_data.persistence import IFileSystem, LocalFileSystem, MemoryFileSystem
from app_data.store import KeyedJSONStore, StoreState

__all__ = [
    "KeyedJSONStore",
    "StoreState",
    "StoreSettings",
    "InMemoryMirror",
    "IFileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "user_app_data_dir",
    "AppDataError",
    "ConfigurationError",
    "StorageError",
    "SerializationError",
    "TypeMismatchError",
    "get_default_store",
    "reset_default_store",
    "set_app_name",
    "enable_in_memory_cache",
    "disable_in_memory_cache",
    "write",
    "read",
    "save",
    "set",
    "get",
    "get_array",
    "add_to_array",
    "remove",
]

_default_store: Optional[KeyedJSONStore] = None


def get_default_store() -> KeyedJSONStore:
    """Return the process-wide store, creating it from ``StoreSettings()`` on first use."""
    global _default_store
    if _default_store is None:
        _default_store = KeyedJSONStore(StoreSettings())
    return _default_store


def reset_default_store(store: KeyedJSONStore | None = None) -> None:
    """Replace the process-wide store (None rebuilds it lazily from settings)."""
    global _default_store
    _default_store = store


def set_app_name(name: str) -> None:
    get_default_store().set_app_name(name)


def enable_in_memory_cache() -> None:
    get_default_store().enable_in_memory_cache()


def disable_in_memory_cache() -> None:
    get_default_store().disable_in_memory_cache()


async def write(key: str, content: Optional[str]) -> None:
    await get_default_store().write(key, content)


async def read(key: str) -> Optional[str]:
    return await get_default_store().read(key)


async def save(key: str, value: Any) -> None:
    await get_default_store().save(key, value)


async def set(key: str, value: Any) -> None:  # noqa: A001
    await get_default_store().set(key, value)


async def get(key: str) -> Any:
    return await get_default_store().get(key)


async def get_array(key: str) -> list[Any]:
    return await get_default_store().get_array(key)


async def add_to_array(key: str, item: Any) -> None:
    await get_default_store().add_to_array(key, item)


async def remove(key: str) -> None:
    await get_default_store().remove(key)
