"""Restriction evaluator — decides which requested options a caller may read."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from functools import cached_property
from typing import TYPE_CHECKING, Any

from rest_options.exceptions import InvalidParamError
from rest_options.option_names import (
    OPTION_NAME_API_KEY,
    OPTION_NAME_RESTRICTION_LIST,
    OPTION_NAME_RESTRICTION_TYPE,
)

if TYPE_CHECKING:
    from rest_options.stores.base import Store

DELIMITER_NEW_LINE = "\n"
MAX_REQUESTED_OPTIONS = 100

MSG_NOT_AN_ARRAY = "Options must be an array"
MSG_EMPTY = "Options must not be empty"
MSG_TOO_MANY = f"Options must not contain more than {MAX_REQUESTED_OPTIONS} items"
MSG_NOT_A_STRING = "Each option must be a string"


class RestrictionType(StrEnum):
    ALLOW_ALL = "allow_all"
    ALLOW_ONLY = "allow_only"
    RESTRICT_ONLY = "restrict_only"


DEFAULT_RESTRICTION_TYPE = RestrictionType.RESTRICT_ONLY
DEFAULT_RESTRICTION_LIST = OPTION_NAME_API_KEY


def parse_restriction_list(text: str) -> list[str]:
    """Split *text* on newlines, trim each line and drop the empty ones.

    >>> parse_restriction_list("a\\n b \\n\\nc")
    ['a', 'b', 'c']
    """
    lines = (line.strip() for line in text.split(DELIMITER_NEW_LINE))
    return [line for line in lines if line]


@dataclass(frozen=True)
class RestrictionPolicy:
    """The administrator-configured allow/restrict policy.

    Attributes:
        mode:  How ``items`` is interpreted.
        items: Option names, in the order the administrator entered them.
    """

    mode: RestrictionType = DEFAULT_RESTRICTION_TYPE
    items: tuple[str, ...] = (DEFAULT_RESTRICTION_LIST,)

    @classmethod
    def from_text(cls, mode: str | RestrictionType, text: str) -> RestrictionPolicy:
        return cls(mode=RestrictionType(mode), items=tuple(parse_restriction_list(text)))

    @classmethod
    async def load(cls, store: Store) -> RestrictionPolicy:
        """Read the policy from *store*, falling back to the defaults.

        An unrecognised stored mode falls back to the default mode.
        """
        raw_mode = await store.get(OPTION_NAME_RESTRICTION_TYPE, DEFAULT_RESTRICTION_TYPE.value)
        raw_list = await store.get(OPTION_NAME_RESTRICTION_LIST, DEFAULT_RESTRICTION_LIST)
        try:
            mode = RestrictionType(raw_mode)
        except ValueError:
            mode = DEFAULT_RESTRICTION_TYPE
        text = raw_list if isinstance(raw_list, str) else ""
        return cls(mode=mode, items=tuple(parse_restriction_list(text)))

    async def save(self, store: Store) -> None:
        await store.set(OPTION_NAME_RESTRICTION_TYPE, self.mode.value)
        await store.set(OPTION_NAME_RESTRICTION_LIST, self.list_text)

    @cached_property
    def _item_set(self) -> frozenset[str]:
        return frozenset(self.items)

    @property
    def list_text(self) -> str:
        return DELIMITER_NEW_LINE.join(self.items)

    def permits(self, name: str) -> bool:
        if self.mode is RestrictionType.ALLOW_ALL:
            return True
        listed = name in self._item_set
        if self.mode is RestrictionType.ALLOW_ONLY:
            return listed
        return not listed


def validate_requested(raw: Any) -> list[str]:
    """Check the shape of the ``options`` request field.

    Raises:
        InvalidParamError: If *raw* is not a non-empty list of at most
            ``MAX_REQUESTED_OPTIONS`` strings.
    """
    if not isinstance(raw, list):
        raise InvalidParamError(MSG_NOT_AN_ARRAY)
    if not raw:
        raise InvalidParamError(MSG_EMPTY)
    if len(raw) > MAX_REQUESTED_OPTIONS:
        raise InvalidParamError(MSG_TOO_MANY)
    if not all(isinstance(item, str) for item in raw):
        raise InvalidParamError(MSG_NOT_A_STRING)
    return list(raw)


async def evaluate(
    requested: Iterable[str],
    policy: RestrictionPolicy,
    store: Store,
) -> dict[str, Any]:
    """Return ``{name: value}`` for every requested name the policy permits.

    Names the policy refuses are left out of the mapping entirely; permitted
    names that are not in the store map to ``None``.
    """
    options: dict[str, Any] = {}
    for name in requested:
        if not policy.permits(name):
            continue
        options[name] = await store.get(name, None)
    return options
