"""Access gate — validates the caller's API key against the stored secret."""

from __future__ import annotations

import hmac
import logging
from typing import TYPE_CHECKING

from rest_options.option_names import OPTION_NAME_API_KEY
from rest_options.result import GateResult

if TYPE_CHECKING:
    from rest_options.stores.base import Store

logger = logging.getLogger(__name__)


def authorize(provided_key: str | None, stored_key: str | None) -> GateResult:
    """Compare *provided_key* with *stored_key* in constant time.

    Denies when either side is missing or empty, or when they differ.
    """
    if not provided_key or not isinstance(stored_key, str) or not stored_key:
        return GateResult.deny()

    if hmac.compare_digest(provided_key.encode("utf-8"), stored_key.encode("utf-8")):
        return GateResult.allow()
    return GateResult.deny()


async def check_api_key(store: Store, provided_key: str | None) -> GateResult:
    """Load the stored secret from *store* and run :func:`authorize`."""
    stored_key = await store.get(OPTION_NAME_API_KEY)
    result = authorize(provided_key, stored_key)
    if not result.allowed:
        if stored_key in (None, ""):
            logger.warning("Rejected request: no API key has been generated yet")
        else:
            logger.warning("Rejected request: missing or invalid API key")
    return result
