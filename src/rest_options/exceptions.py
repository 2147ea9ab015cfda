"""Custom exceptions for the rest_options package."""

from __future__ import annotations


class RestOptionsError(Exception):
    """Base exception for all rest_options errors."""


class RequestError(RestOptionsError):
    """An error that terminates a request with a structured error envelope.

    Attributes:
        code:    Machine-readable error code (``"unauthorized"``, ...).
        message: Human-readable message returned to the caller.
        status:  HTTP status code.
    """

    code: str = "error"
    status: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnauthorizedError(RequestError):
    """Raised when the API key is missing or does not match."""

    code = "unauthorized"
    status = 401

    def __init__(self, message: str = "Invalid API key") -> None:
        super().__init__(message)


class InvalidParamError(RequestError):
    """Raised when the request body fails shape, size or type validation."""

    code = "invalid_param"
    status = 400


class StoreError(RestOptionsError):
    """Raised when a store operation fails."""

    def __init__(self, operation: str, detail: str = "") -> None:
        self.operation = operation
        msg = f"Store error during '{operation}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)


class KeyGenerationError(RestOptionsError):
    """Raised when no cryptographically secure random source is available."""


class ConfigError(RestOptionsError):
    """Raised when the service configuration is invalid."""

    def __init__(self, setting: str, message: str) -> None:
        self.setting = setting
        super().__init__(f"Setting '{setting}' misconfigured: {message}")
