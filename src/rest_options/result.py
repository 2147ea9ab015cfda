"""GateResult — the outcome of an API key check."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GateResult:
    """Immutable result returned by :func:`rest_options.gate.authorize`.

    Attributes:
        allowed: ``True`` if the caller may proceed.
        status:  HTTP status to answer with on denial.
        code:    Error code on denial.
        message: Human-readable explanation (only set on denial).
    """

    allowed: bool
    status: int = 200
    code: str = ""
    message: str = ""

    # ── Factory helpers ──────────────────────────────────────

    @staticmethod
    def allow() -> GateResult:
        return GateResult(allowed=True)

    @staticmethod
    def deny(message: str = "Invalid API key") -> GateResult:
        return GateResult(
            allowed=False,
            status=401,
            code="unauthorized",
            message=message,
        )
