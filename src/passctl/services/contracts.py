"""Typed payload contracts for service boundaries.

These models validate operation payload shapes before they leave the
service layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class IssueItem(BaseModel):
    """One validator finding."""

    field: str
    code: str
    message: str
    severity: Literal["error", "warning"]


class ValidateResultData(BaseModel):
    """Payload contract for ``DraftService.validate``."""

    style: str
    valid: bool
    exportable: bool
    error_count: int
    warning_count: int
    errors: list[IssueItem]
    warnings: list[IssueItem]


class CapacityRow(BaseModel):
    """Count and remaining slots for one field group."""

    group: str
    count: int
    limit: int | Literal["unlimited"]
    remaining: int | Literal["unlimited"]
    can_add: bool


class CapacityResultData(BaseModel):
    """Payload contract for ``DraftService.capacity``."""

    style: str
    groups: list[CapacityRow]


class MutationResultData(BaseModel):
    """Payload contract for draft mutations."""

    model_config = ConfigDict(extra="allow")

    path: str
    style: str
    changed: bool
    valid: bool
    error_count: int
    warning_count: int


class TemplateItem(BaseModel):
    id: str
    name: str
    description: str
    style: str


class TemplatesResultData(BaseModel):
    """Payload contract for ``DraftService.list_templates``."""

    count: int
    items: list[TemplateItem]
