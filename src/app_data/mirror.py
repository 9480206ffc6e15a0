"""In-process mirror of serialized values, toggled on and off at runtime."""

from __future__ import annotations

from typing import Optional


class InMemoryMirror:
    """Unbounded key -> raw JSON text map with an enabled flag.

    Every enable/disable transition clears the contents. While disabled,
    lookups miss and mutations are ignored. Methods never await, so each
    call is atomic with respect to other coroutines.
    """

    def __init__(self, enabled: bool = False) -> None:
        self._enabled = enabled
        self._entries: dict[str, str] = {}

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> bool:
        """Clear and enable. Returns False if it was already enabled."""
        if self._enabled:
            return False
        self._entries.clear()
        self._enabled = True
        return True

    def disable(self) -> bool:
        """Clear and disable. Returns False if it was already disabled."""
        if not self._enabled:
            return False
        self._entries.clear()
        self._enabled = False
        return True

    def lookup(self, key: str) -> Optional[str]:
        if not self._enabled:
            return None
        return self._entries.get(key)

    def put(self, key: str, content: str) -> None:
        if self._enabled:
            self._entries[key] = content

    def discard(self, key: str) -> None:
        if self._enabled:
            self._entries.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return self._enabled and key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
