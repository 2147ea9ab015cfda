"""Shared test fixtures."""

import pytest

from rest_options import OptionsService
from rest_options.option_names import OPTION_NAME_API_KEY
from rest_options.stores import InMemoryStore

API_KEY = "a" * 64


@pytest.fixture
def store():
    return InMemoryStore(
        {
            OPTION_NAME_API_KEY: API_KEY,
            "blogname": "Acme",
            "posts_per_page": 10,
            "active_plugins": ["akismet", "rest-options"],
            "maintenance": None,
        }
    )


@pytest.fixture
def empty_store():
    return InMemoryStore()


@pytest.fixture
def service(store):
    return OptionsService(store)


@pytest.fixture
def api_key():
    return API_KEY
