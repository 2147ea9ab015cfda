"""Tests for SQLiteStore."""

import asyncio

import aiosqlite
import pytest

from rest_options.exceptions import StoreError
from rest_options.stores import SQLiteStore


@pytest.fixture
async def store():
    s = SQLiteStore(":memory:")
    yield s
    await s.close()


async def test_get_nonexistent(store):
    assert await store.get("nope") is None
    assert await store.get("nope", 5) == 5


async def test_values_round_trip(store):
    await store.set("s", "text")
    await store.set("n", 3.5)
    await store.set("l", ["a", 1, None])
    await store.set("d", {"nested": True})

    assert await store.get("s") == "text"
    assert await store.get("n") == 3.5
    assert await store.get("l") == ["a", 1, None]
    assert await store.get("d") == {"nested": True}


async def test_stored_none_is_not_default(store):
    await store.set("k", None)
    assert await store.get("k", "fallback") is None


async def test_overwrite(store):
    await store.set("k", 1)
    await store.set("k", 2)
    assert await store.get("k") == 2


async def test_unserializable_value_raises(store):
    with pytest.raises(StoreError) as exc_info:
        await store.set("k", object())
    assert exc_info.value.operation == "set"


async def test_concurrent_first_use_opens_one_connection(monkeypatch, tmp_path):
    opened = []
    real_connect = aiosqlite.connect

    def counting_connect(*args, **kwargs):
        conn = real_connect(*args, **kwargs)
        opened.append(conn)
        return conn

    monkeypatch.setattr("rest_options.stores.sqlite.aiosqlite.connect", counting_connect)

    store = SQLiteStore(str(tmp_path / "options.db"))
    try:
        results = await asyncio.gather(*(store.get("a") for _ in range(5)))
    finally:
        await store.close()

    assert results == [None] * 5
    assert len(opened) == 1


async def test_close_then_reuse_reconnects(tmp_path):
    store = SQLiteStore(str(tmp_path / "options.db"))
    await store.set("k", "v")
    await store.close()
    try:
        assert await store.get("k") == "v"
    finally:
        await store.close()


async def test_persists_across_connections(tmp_path):
    path = str(tmp_path / "options.db")
    first = SQLiteStore(path)
    await first.set("blogname", "Acme")
    await first.close()

    second = SQLiteStore(path)
    try:
        assert await second.get("blogname") == "Acme"
    finally:
        await second.close()
