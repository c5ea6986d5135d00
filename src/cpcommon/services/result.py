"""ServiceResult and ServiceError — what every EnumService operation returns.

INVARIANT: Expected failures (unknown classification, bad argument, lookup
miss, failed conversion, broken factory configuration) come back as
``ok=False`` results carrying a ServiceError; they are never raised.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ServiceError(BaseModel):
    """Machine-readable failure: an error code, a message and free-form detail."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"lookup"``, ``"list_constants"``, ...).
        data: Operation payload; empty on failure.
        warnings: Non-fatal notes for the caller.
        error: Present exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_matches_ok(self) -> ServiceResult:
        if self.ok == (self.error is not None):
            msg = "error must be set exactly when ok is False"
            raise ValueError(msg)
        return self

    @classmethod
    def success(cls, op: str, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data)

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
