"""Store protocol — the settings store the gate reads from and writes to."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Store(ABC):
    """Abstract base for all settings backends.

    A store is a flat mapping of option *name* to value.  Values are anything
    JSON can carry: strings, numbers, booleans, lists, dicts or ``None``.
    The store guarantees name uniqueness and nothing more.
    """

    @abstractmethod
    async def get(self, name: str, default: Any = None) -> Any:
        """Return the stored value, or *default* if the name is not set."""
        ...

    @abstractmethod
    async def set(self, name: str, value: Any) -> None:
        """Create or overwrite a value."""
        ...

    async def close(self) -> None:
        """Release any resources held by the backend."""
