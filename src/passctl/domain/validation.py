"""Draft validator — the export gate.

Re-derives the layout definition from the draft's style and checks the
draft independently of whatever the capacity guard already enforced.

Errors block export (both wallets reject or truncate structurally
invalid passes). Warnings are advisory: stale image slots from an
earlier style, conflicts the renderers resolve deterministically,
text that may be truncated, and stamp fields the synthesizer could not
write.

INVARIANT: ``validate_draft`` is pure and total; nothing is cached and
nothing is raised for user data.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from passctl.domain.draft import MAX_LOCATIONS, PassDraft
from passctl.domain.layouts import (
    SQUARE_BARCODE_COMBINED_LIMIT,
    LayoutDefinition,
    blocked_by_strip,
    get_layout_definition,
)
from passctl.domain.stamps import PROGRESS_VISUAL_KEY, STAMPS_KEY
from passctl.domain.types import FieldGroup, ImageSlot, is_square_barcode, supports_stamps

Severity = Literal["error", "warning"]

SEVERITY_ERROR: Severity = "error"
SEVERITY_WARNING: Severity = "warning"

# Issue codes
CODE_REQUIRED = "required"
CODE_FIELD_LIMIT = "field_limit"
CODE_DUPLICATE_KEY = "duplicate_key"
CODE_IMAGE_NOT_ALLOWED = "image_not_allowed"
CODE_IMAGE_CONFLICT = "image_conflict"
CODE_SQUARE_BARCODE = "square_barcode_fields"
CODE_TEXT_LENGTH = "text_length"
CODE_STAMP_MISSING = "stamp_progress_missing"
CODE_LOCATION_LIMIT = "location_limit"
CODE_COORDINATE_RANGE = "coordinate_range"


class ValidationIssue(BaseModel):
    """One finding. ``field`` is a dotted path into the draft."""

    model_config = {"frozen": True}

    field: str
    code: str
    message: str
    severity: Severity


class ValidationResult(BaseModel):
    """Pass/fail plus issue lists. ``valid`` iff there are no errors."""

    model_config = {"frozen": True}

    valid: bool
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)


@dataclass(frozen=True)
class TextLengthLimits:
    """Value lengths above which wallets start truncating."""

    header_value: int = 10
    primary_value: int = 20
    logo_text: int = 20
    enabled: bool = True


DEFAULT_TEXT_LIMITS = TextLengthLimits()


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_draft(
    draft: PassDraft,
    *,
    text_limits: TextLengthLimits | None = None,
) -> ValidationResult:
    """Evaluate *draft* against the rules of its style."""
    definition = get_layout_definition(draft.style)
    limits = text_limits or DEFAULT_TEXT_LIMITS

    errors: list[ValidationIssue] = []
    warnings: list[ValidationIssue] = []

    errors.extend(_check_required(draft))
    errors.extend(_check_field_limits(draft, definition))
    errors.extend(_check_unique_keys(draft))
    errors.extend(_check_locations(draft))
    warnings.extend(_check_image_slots(draft, definition))
    warnings.extend(_check_strip_conflict(draft))
    warnings.extend(_check_square_barcode(draft, definition))
    if limits.enabled:
        warnings.extend(_check_text_lengths(draft, limits))
    warnings.extend(_check_stamp_fields(draft))

    return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def is_exportable(result: ValidationResult) -> bool:
    """Export gate: permitted iff the result carries no errors."""
    return not result.errors


def is_valid_draft(draft: PassDraft) -> bool:
    return validate_draft(draft).valid


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


def _error(field: str, code: str, message: str) -> ValidationIssue:
    return ValidationIssue(field=field, code=code, message=message, severity=SEVERITY_ERROR)


def _warning(field: str, code: str, message: str) -> ValidationIssue:
    return ValidationIssue(field=field, code=code, message=message, severity=SEVERITY_WARNING)


def _check_required(draft: PassDraft) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not draft.content.description.strip():
        issues.append(_error("content.description", CODE_REQUIRED, "Description is required"))
    if not draft.barcode.message.strip():
        issues.append(_error("barcode.message", CODE_REQUIRED, "Barcode message is required"))
    return issues


def _check_field_limits(draft: PassDraft, definition: LayoutDefinition) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for group in FieldGroup:
        if definition.is_unlimited(group):
            continue
        limit = definition.limit_for(group)
        count = len(draft.group(group))
        if count > limit:
            issues.append(
                _error(
                    f"fields.{group}",
                    CODE_FIELD_LIMIT,
                    f"{group} holds {count} fields; {definition.display_name} allows {limit}",
                )
            )
    return issues


def _check_unique_keys(draft: PassDraft) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for group in FieldGroup:
        counts = Counter(item.key for item in draft.group(group))
        for key, count in counts.items():
            if count > 1:
                issues.append(
                    _error(
                        f"fields.{group}",
                        CODE_DUPLICATE_KEY,
                        f"Key '{key}' is used {count} times in {group}",
                    )
                )
    return issues


def _check_locations(draft: PassDraft) -> list[ValidationIssue]:
    locations = draft.relevance.locations
    issues: list[ValidationIssue] = []
    if len(locations) > MAX_LOCATIONS:
        issues.append(
            _error(
                "relevance.locations",
                CODE_LOCATION_LIMIT,
                f"{len(locations)} locations set; wallets use at most {MAX_LOCATIONS}",
            )
        )
    for index, location in enumerate(locations):
        if not -90 <= location.latitude <= 90:
            issues.append(
                _error(
                    f"relevance.locations[{index}].latitude",
                    CODE_COORDINATE_RANGE,
                    f"Latitude {location.latitude} is outside -90..90",
                )
            )
        if not -180 <= location.longitude <= 180:
            issues.append(
                _error(
                    f"relevance.locations[{index}].longitude",
                    CODE_COORDINATE_RANGE,
                    f"Longitude {location.longitude} is outside -180..180",
                )
            )
    return issues


# ---------------------------------------------------------------------------
# Warnings
# ---------------------------------------------------------------------------


def _check_image_slots(draft: PassDraft, definition: LayoutDefinition) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for slot in ImageSlot:
        if draft.image(slot) is not None and slot not in definition.allowed_images:
            issues.append(
                _warning(
                    f"images.{slot}",
                    CODE_IMAGE_NOT_ALLOWED,
                    f"{slot} is not used by {definition.display_name} and will be ignored",
                )
            )
    return issues


def _check_strip_conflict(draft: PassDraft) -> list[ValidationIssue]:
    blocked = blocked_by_strip(draft.style, draft.images)
    return [
        _warning(
            f"images.{slot}",
            CODE_IMAGE_CONFLICT,
            f"{slot} is hidden because a strip image is set",
        )
        for slot in (ImageSlot.BACKGROUND, ImageSlot.THUMBNAIL)
        if slot in blocked and draft.image(slot) is not None
    ]


def _check_square_barcode(draft: PassDraft, definition: LayoutDefinition) -> list[ValidationIssue]:
    if not definition.rules.square_barcode_reduces_fields:
        return []
    if not is_square_barcode(draft.barcode.format):
        return []
    combined = len(draft.group(FieldGroup.SECONDARY)) + len(draft.group(FieldGroup.AUXILIARY))
    if combined <= SQUARE_BARCODE_COMBINED_LIMIT:
        return []
    return [
        _warning(
            f"fields.{FieldGroup.SECONDARY}",
            CODE_SQUARE_BARCODE,
            f"With a square barcode, secondary and auxiliary fields together should not "
            f"exceed {SQUARE_BARCODE_COMBINED_LIMIT} (found {combined})",
        )
    ]


def _check_text_lengths(draft: PassDraft, limits: TextLengthLimits) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    checks = (
        (FieldGroup.PRIMARY, limits.primary_value),
        (FieldGroup.HEADER, limits.header_value),
    )
    for group, max_len in checks:
        for index, item in enumerate(draft.group(group)):
            if len(item.value) > max_len:
                issues.append(
                    _warning(
                        f"fields.{group}[{index}]",
                        CODE_TEXT_LENGTH,
                        f"Value '{item.value}' may be truncated (over {max_len} characters)",
                    )
                )
    logo_text = draft.content.logo_text
    if logo_text and len(logo_text) > limits.logo_text:
        issues.append(
            _warning(
                "content.logo_text",
                CODE_TEXT_LENGTH,
                f"Logo text may be truncated (over {limits.logo_text} characters)",
            )
        )
    return issues


def _check_stamp_fields(draft: PassDraft) -> list[ValidationIssue]:
    if draft.stamp_config is None or not supports_stamps(draft.style):
        return []
    issues: list[ValidationIssue] = []
    expected = (
        (FieldGroup.PRIMARY, STAMPS_KEY),
        (FieldGroup.AUXILIARY, PROGRESS_VISUAL_KEY),
    )
    for group, key in expected:
        if draft.find_field(group, key) is None:
            issues.append(
                _warning(
                    f"fields.{group}",
                    CODE_STAMP_MISSING,
                    f"Stamp progress field '{key}' is not in {group}",
                )
            )
    return issues
