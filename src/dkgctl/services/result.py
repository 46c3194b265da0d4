"""ServiceResult and ServiceError — the contract every operation returns.

INVARIANT: OperationRegistry.execute() always returns a ServiceResult.
The MCP adapter, the REST adapter and the CLI consume this type; none of
them ever sees a raw handler exception.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

ErrorCode = Literal["invalid_input", "downstream_error", "unknown_operation"]

# HTTP status each error code maps to on the REST surface.
HTTP_STATUS: dict[str, int] = {
    "invalid_input": 400,
    "unknown_operation": 404,
    "downstream_error": 500,
}


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @property
    def http_status(self) -> int:
        return HTTP_STATUS[self.code]


class ServiceResult(BaseModel):
    """Universal return type for all operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"echo_message"``).
        data: Operation output on success, serialized by alias.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @classmethod
    def failure(
        cls,
        op: str,
        code: ErrorCode,
        message: str,
        **detail: Any,
    ) -> ServiceResult:
        """Build a failed result."""
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
