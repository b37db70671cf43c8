"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult.
The CLI renders it; the HTTP API maps ``error.code`` to a status code.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure codes carried in :class:`ServiceError`."""

    NOT_FOUND = "NOT_FOUND"
    INVALID_POST = "INVALID_POST"
    CONTENT_ROOT_MISSING = "CONTENT_ROOT_MISSING"
    WRITE_FAILED = "WRITE_FAILED"
    TEMPLATE_ERROR = "TEMPLATE_ERROR"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"list_posts"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues, such as skipped content files.
        error: Structured error if ``ok`` is False.
        meta: Scan statistics for verbose output.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result for *op*."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None
