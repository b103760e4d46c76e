"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: Every operation and service method returns ServiceResult.
The CLI consumes this type through ``AppContext.emit``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from huak.errors import HuakError


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
        op: Name of the operation (e.g. ``"add_project_dependencies"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build a failed result in one call."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail or {}),
        )

    @classmethod
    def from_exception(cls, op: str, exc: Exception) -> ServiceResult:
        """Convert a raised HuakError or OSError into a failed result."""
        if isinstance(exc, HuakError):
            return cls.failure(op, exc.code, exc.message)
        if isinstance(exc, OSError):
            detail = {"path": str(exc.filename)} if exc.filename else {}
            return cls.failure(op, "IO_ERROR", str(exc), detail)
        return cls.failure(op, "INTERNAL_ERROR", str(exc))
