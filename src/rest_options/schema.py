# Copyright (c) 2024 OpenMined
# SPDX-License-Identifier: Apache-2.0
"""Data transfer objects for the HTTP surface and configuration.

These Pydantic models define the wire contract of the lookup endpoint
and the admin surface. Changes here change what clients see.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from rest_options.restrictions import RestrictionType


class StoreConfigSchema(BaseModel):
    """Settings store configuration.

    Attributes:
        type: Store type ("memory" or "sqlite")
        path: Path to SQLite database file (for sqlite type)
    """

    type: Literal["memory", "sqlite"] = "memory"
    path: str = ""


class StatusData(BaseModel):
    """The ``data`` member of an error envelope."""

    status: int


class ErrorResponse(BaseModel):
    """Error envelope returned for any rejected request.

    Attributes:
        code: Error code ("unauthorized" or "invalid_param")
        message: Human-readable explanation
        data: Carries the HTTP status
    """

    code: str
    message: str
    data: StatusData

    @property
    def status(self) -> int:
        return self.data.status


class OptionsData(BaseModel):
    """The ``data`` member of a successful lookup."""

    status: int = 200
    options: dict[str, Any] = Field(default_factory=dict)


class SuccessResponse(BaseModel):
    """Success envelope for the lookup endpoint.

    Attributes:
        code: Always "success"
        message: Always "Options retrieved successfully."
        data: HTTP status and the permitted options
    """

    code: str = "success"
    message: str = "Options retrieved successfully."
    data: OptionsData = Field(default_factory=OptionsData)

    @property
    def status(self) -> int:
        return self.data.status


class ApiKeyResponse(BaseModel):
    """Answer to a regenerate-key command."""

    api_key: str


class SettingsSnapshot(BaseModel):
    """What the admin settings page shows.

    Attributes:
        api_key: Current key, or a placeholder when none exists yet
        has_api_key: Whether a key has been generated
        restriction_type: Active restriction mode
        restriction_list: Restriction list text, one name per line
        endpoint: Path of the lookup endpoint
    """

    api_key: str
    has_api_key: bool
    restriction_type: RestrictionType
    restriction_list: str
    endpoint: str
