"""Service configuration, read from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from rest_options.exceptions import ConfigError
from rest_options.schema import StoreConfigSchema
from rest_options.stores import InMemoryStore, SQLiteStore, Store

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8001
DEFAULT_NAMESPACE = "rest-options/v1"
DEFAULT_STORE_PATH = "rest_options.db"


class ServiceConfig(BaseModel):
    """Runtime settings for the HTTP service.

    Attributes:
        host: Interface to bind
        port: Port to bind
        namespace: Route prefix of the lookup endpoint
        store: Settings store configuration
        admin_token: Token guarding the admin routes; admin routes are
            not mounted when unset
        debug: Verbose logging
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    namespace: str = DEFAULT_NAMESPACE
    store: StoreConfigSchema = Field(default_factory=StoreConfigSchema)
    admin_token: str | None = None
    debug: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServiceConfig:
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            "host": env.get("REST_OPTIONS_HOST", DEFAULT_HOST),
            "port": env.get("REST_OPTIONS_PORT", DEFAULT_PORT),
            "namespace": env.get("REST_OPTIONS_NAMESPACE", DEFAULT_NAMESPACE).strip("/"),
            "store": {
                "type": env.get("REST_OPTIONS_STORE", "memory").lower(),
                "path": env.get("REST_OPTIONS_STORE_PATH", DEFAULT_STORE_PATH),
            },
            "admin_token": env.get("REST_OPTIONS_ADMIN_TOKEN") or None,
            "debug": env.get("DEBUG", "0") == "1",
        }
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError("environment", str(e)) from e

    @property
    def endpoint(self) -> str:
        return f"/{self.namespace}/get-options"


def create_store(config: StoreConfigSchema) -> Store:
    """Create store from configuration.

    Args:
        config: Store configuration

    Returns:
        Store instance

    Raises:
        ConfigError: If a sqlite store has no path
    """
    if config.type == "sqlite":
        if not config.path:
            raise ConfigError("store.path", "SQLite store requires a path")
        logger.info(f"Using SQLite settings store at {config.path}")
        return SQLiteStore(config.path)
    logger.info("Using in-memory settings store (data is lost on exit)")
    return InMemoryStore()
