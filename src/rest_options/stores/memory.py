"""InMemoryStore — zero-config, dict-backed settings for development and testing."""

from __future__ import annotations

from typing import Any

from rest_options.stores.base import Store


class InMemoryStore(Store):
    """In-memory store backed by a dict.  Data is lost on process exit."""

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    async def get(self, name: str, default: Any = None) -> Any:
        return self._data.get(name, default)

    async def set(self, name: str, value: Any) -> None:
        self._data[name] = value
