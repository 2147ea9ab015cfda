"""Storage backends for the settings store."""

from rest_options.stores.base import Store
from rest_options.stores.memory import InMemoryStore
from rest_options.stores.sqlite import SQLiteStore

__all__ = ["InMemoryStore", "SQLiteStore", "Store"]
