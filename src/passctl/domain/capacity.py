"""Field-capacity guard.

Pure queries answering whether a field group can take one more field.
The guard is advisory: the draft model accepts over-full groups when a
draft is built directly (e.g. imported), so the validator re-checks
counts independently instead of trusting that the guard was honored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from passctl.domain.draft import MAX_LOCATIONS
from passctl.domain.layouts import get_layout_definition
from passctl.domain.types import FieldGroup, coerce_group

if TYPE_CHECKING:
    from passctl.domain.draft import PassDraft

Unlimited = Literal["unlimited"]
UNLIMITED_CAPACITY: Unlimited = "unlimited"


def can_add_field(draft: PassDraft, group: FieldGroup | str) -> bool:
    """True iff *group* is unlimited or below its ceiling for the draft's style."""
    group = coerce_group(group)
    definition = get_layout_definition(draft.style)
    if definition.is_unlimited(group):
        return True
    return len(draft.group(group)) < definition.limit_for(group)


def get_remaining_field_count(draft: PassDraft, group: FieldGroup | str) -> int | Unlimited:
    """Free slots left in *group*, or ``"unlimited"``. Never negative."""
    group = coerce_group(group)
    definition = get_layout_definition(draft.style)
    if definition.is_unlimited(group):
        return UNLIMITED_CAPACITY
    return max(0, definition.limit_for(group) - len(draft.group(group)))


def capacity_report(draft: PassDraft) -> list[dict[str, object]]:
    """Per-group count, limit and remaining slots, in canonical group order."""
    definition = get_layout_definition(draft.style)
    rows: list[dict[str, object]] = []
    for group in FieldGroup:
        limit = definition.limit_for(group)
        rows.append(
            {
                "group": str(group),
                "count": len(draft.group(group)),
                "limit": UNLIMITED_CAPACITY if definition.is_unlimited(group) else limit,
                "remaining": get_remaining_field_count(draft, group),
                "can_add": can_add_field(draft, group),
            }
        )
    return rows


def can_add_location(draft: PassDraft) -> bool:
    """True iff the draft holds fewer than ``MAX_LOCATIONS`` relevant locations."""
    return len(draft.relevance.locations) < MAX_LOCATIONS
