"""Tests for the access gate."""

import pytest

from rest_options.gate import authorize, check_api_key
from rest_options.option_names import OPTION_NAME_API_KEY


@pytest.mark.parametrize("key", ["k", "a" * 64, "ключ-ü"])
def test_matching_key_allows(key):
    assert authorize(key, key).allowed


@pytest.mark.parametrize("other", ["", "b" * 64, "a" * 63, "a" * 65, "A" * 64])
def test_mismatch_denies(other):
    result = authorize(other, "a" * 64)
    assert not result.allowed
    assert result.status == 401
    assert result.code == "unauthorized"
    assert result.message == "Invalid API key"


def test_missing_provided_key_denies():
    assert not authorize(None, "secret").allowed


@pytest.mark.parametrize("stored", [None, ""])
def test_unset_stored_key_denies(stored):
    assert not authorize("secret", stored).allowed


def test_non_string_stored_key_denies():
    assert not authorize("123", 123).allowed


async def test_check_api_key_reads_store(store, api_key):
    assert (await check_api_key(store, api_key)).allowed
    assert not (await check_api_key(store, "wrong")).allowed


async def test_check_api_key_before_generation(empty_store):
    result = await check_api_key(empty_store, "anything")
    assert not result.allowed


async def test_regenerated_key_invalidates_old(store, api_key):
    await store.set(OPTION_NAME_API_KEY, "b" * 64)
    assert not (await check_api_key(store, api_key)).allowed
    assert (await check_api_key(store, "b" * 64)).allowed
