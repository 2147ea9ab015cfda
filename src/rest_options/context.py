"""RequestContext — what the HTTP layer hands to the options service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class RequestContext:
    """Framework-neutral view of one lookup request.

    Attributes:
        api_key: Value of the ``x-api-key`` header, or ``None``.
        options: The ``options`` member of the decoded JSON body, exactly
                 as received.  ``None`` when the body or the member is
                 missing or the body is not JSON.
    """

    api_key: str | None = None
    options: Any = None

    @classmethod
    def from_body(cls, api_key: str | None, body: Any) -> RequestContext:
        options = body.get("options") if isinstance(body, dict) else None
        return cls(api_key=api_key, options=options)
