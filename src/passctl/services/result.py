"""Result envelope shared by every passctl service call.

Services never raise for user-facing problems (missing draft, unknown
template, export blocked by validation). They return a
:class:`ServiceResult` whose ``error`` carries one of the
:class:`ErrorCode` values, and the CLI decides exit codes and
rendering from that alone.

Declined edits (a full field group, an out-of-range index) are *not*
failures: they come back ``ok`` with ``changed: false`` and a warning.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    """Machine-readable failure codes, stable across releases."""

    NO_DRAFT = "NO_DRAFT"
    INVALID_DRAFT_FILE = "INVALID_DRAFT_FILE"
    DRAFT_EXISTS = "DRAFT_EXISTS"
    UNKNOWN_TEMPLATE = "UNKNOWN_TEMPLATE"
    INVALID_DRAFT = "INVALID_DRAFT"
    STAMPS_UNSUPPORTED = "STAMPS_UNSUPPORTED"


class ServiceError(BaseModel):
    """Why an operation failed; ``detail`` holds paths, counts, issue lists."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one draft operation.

    ``op`` names the operation (``"add_field"``, ``"export"``) and picks
    the human renderer. ``data`` is the op-specific payload; mutation
    payloads always carry ``changed``, ``valid`` and the issue counts.
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
        cls, op: str, code: ErrorCode | str, message: str, **detail: Any
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=str(code), message=message, detail=detail),
        )

    @property
    def error_code(self) -> str | None:
        return self.error.code if self.error else None

    def with_warnings(self, *messages: str) -> ServiceResult:
        """Copy of this result with *messages* appended to ``warnings``."""
        if not messages:
            return self
        return self.model_copy(update={"warnings": [*self.warnings, *messages]})
