"""Tests for configuration loading and store creation."""

import pytest

from rest_options.config import ServiceConfig, create_store
from rest_options.exceptions import ConfigError
from rest_options.schema import StoreConfigSchema
from rest_options.stores import InMemoryStore, SQLiteStore


def test_defaults_from_empty_env():
    config = ServiceConfig.from_env({})
    assert config.host == "0.0.0.0"
    assert config.port == 8001
    assert config.namespace == "rest-options/v1"
    assert config.store.type == "memory"
    assert config.admin_token is None
    assert not config.debug
    assert config.endpoint == "/rest-options/v1/get-options"


def test_values_from_env():
    config = ServiceConfig.from_env(
        {
            "REST_OPTIONS_PORT": "9000",
            "REST_OPTIONS_NAMESPACE": "/opts/v2/",
            "REST_OPTIONS_STORE": "SQLite",
            "REST_OPTIONS_STORE_PATH": "/tmp/x.db",
            "REST_OPTIONS_ADMIN_TOKEN": "t",
            "DEBUG": "1",
        }
    )
    assert config.port == 9000
    assert config.endpoint == "/opts/v2/get-options"
    assert config.store == StoreConfigSchema(type="sqlite", path="/tmp/x.db")
    assert config.admin_token == "t"
    assert config.debug


@pytest.mark.parametrize("env", [{"REST_OPTIONS_PORT": "eighty"}, {"REST_OPTIONS_STORE": "redis"}])
def test_invalid_env_raises(env):
    with pytest.raises(ConfigError):
        ServiceConfig.from_env(env)


def test_create_memory_store():
    assert isinstance(create_store(StoreConfigSchema()), InMemoryStore)


def test_create_sqlite_store(tmp_path):
    store = create_store(StoreConfigSchema(type="sqlite", path=str(tmp_path / "o.db")))
    assert isinstance(store, SQLiteStore)


def test_sqlite_store_requires_path():
    with pytest.raises(ConfigError):
        create_store(StoreConfigSchema(type="sqlite", path=""))
