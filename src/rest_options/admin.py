"""Admin commands — regenerate the API key and save the restriction policy.

Each command is its own type and is dispatched by :class:`AdminRouter`
through an explicit registry, the same way form actions on the settings
page map to handlers.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel

from rest_options.keys import generate_api_key
from rest_options.option_names import OPTION_NAME_API_KEY
from rest_options.restrictions import RestrictionPolicy, RestrictionType
from rest_options.schema import ApiKeyResponse, SettingsSnapshot

if TYPE_CHECKING:
    from rest_options.stores.base import Store

logger = logging.getLogger(__name__)

NO_API_KEY_PLACEHOLDER = "No API key generated yet."

_TAG_RE = re.compile(r"<[^>]*>")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")


def sanitize_restriction_list(text: str) -> str:
    """Clean free text from the admin form before it is stored.

    Line endings are normalised to ``\\n``, tabs become spaces, HTML tags and
    other control characters are removed and every line is stripped.  Line
    breaks survive because they separate the option names.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", " ")
    text = _TAG_RE.sub("", text)
    text = _CONTROL_RE.sub("", text)
    return "\n".join(line.strip() for line in text.split("\n")).strip("\n")


# ── commands ─────────────────────────────────────────────────


class RegenerateApiKey(BaseModel):
    """Generate a new API key, replacing (and invalidating) the current one."""


class SaveRestrictionPolicy(BaseModel):
    """Store a new restriction mode and list.

    Attributes:
        restriction_type: One of allow_all, allow_only, restrict_only
        restriction_list: Free text, one option name per line
    """

    restriction_type: RestrictionType
    restriction_list: str = ""


AdminCommand = RegenerateApiKey | SaveRestrictionPolicy


async def regenerate_api_key(store: Store, command: RegenerateApiKey) -> ApiKeyResponse:
    api_key = generate_api_key()
    await store.set(OPTION_NAME_API_KEY, api_key)
    logger.info("Generated a new API key; previous key is no longer valid")
    return ApiKeyResponse(api_key=api_key)


async def save_restriction_policy(
    store: Store, command: SaveRestrictionPolicy
) -> RestrictionPolicy:
    text = sanitize_restriction_list(command.restriction_list)
    policy = RestrictionPolicy.from_text(command.restriction_type, text)
    await policy.save(store)
    logger.info(
        "Saved restriction policy: mode=%s, %d listed option(s)",
        policy.mode.value,
        len(policy.items),
    )
    return policy


async def settings_snapshot(store: Store, endpoint: str = "") -> SettingsSnapshot:
    """Return the current admin-visible configuration."""
    api_key = await store.get(OPTION_NAME_API_KEY)
    policy = await RestrictionPolicy.load(store)
    return SettingsSnapshot(
        api_key=api_key or NO_API_KEY_PLACEHOLDER,
        has_api_key=bool(api_key),
        restriction_type=policy.mode,
        restriction_list=policy.list_text,
        endpoint=endpoint,
    )


Handler = Callable[["Store", Any], Awaitable[Any]]


class AdminRouter:
    """Dispatches admin commands to their handlers by command type.

    Example:
        router = AdminRouter(store)
        await router.dispatch(RegenerateApiKey())
    """

    _registry: ClassVar[dict[type[BaseModel], Handler]] = {
        RegenerateApiKey: regenerate_api_key,
        SaveRestrictionPolicy: save_restriction_policy,
    }

    def __init__(self, store: Store) -> None:
        self._store = store

    @classmethod
    def registered_commands(cls) -> list[str]:
        return [command.__name__ for command in cls._registry]

    async def dispatch(self, command: AdminCommand) -> Any:
        handler = self._registry.get(type(command))
        if handler is None:
            raise TypeError(f"No handler registered for {type(command).__name__}")
        return await handler(self._store, command)
