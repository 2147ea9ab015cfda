"""API key generation."""

from __future__ import annotations

import secrets

from rest_options.exceptions import KeyGenerationError

API_KEY_BYTES = 32


def generate_api_key() -> str:
    """Return a new 64-character lowercase hex key from 32 random bytes.

    Raises:
        KeyGenerationError: If the operating system has no secure random
            source.  No weaker fallback is attempted.
    """
    try:
        return secrets.token_bytes(API_KEY_BYTES).hex()
    except NotImplementedError as exc:
        raise KeyGenerationError("No cryptographically secure random source available") from exc
