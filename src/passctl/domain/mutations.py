"""Draft mutations — copy-on-write transforms ``(draft, ...) -> PassDraft``.

INVARIANT: No function here mutates its input. A denied or invalid
operation returns the *same* draft object, so callers detect a no-op
with ``new is draft``.

Capacity denials, out-of-range indices and key collisions are not
errors: the editor disables those actions up front and the validator
is the backstop for drafts built any other way.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from passctl.domain.capacity import can_add_field, can_add_location
from passctl.domain.draft import (
    MAX_LOCATIONS,
    BarcodeConfig,
    DraftMeta,
    ImageRef,
    PassColors,
    PassContent,
    PassDraft,
    PassField,
    PassLocation,
    Relevance,
    StampConfig,
)
from passctl.domain.types import (
    FieldGroup,
    ImageSlot,
    PassStyle,
    coerce_group,
    coerce_slot,
    coerce_style,
    supports_stamps,
)

logger = logging.getLogger(__name__)

FIELD_KEY_PREFIX = "field_"


def _replace_group(
    draft: PassDraft,
    group: FieldGroup,
    items: tuple[PassField, ...],
) -> PassDraft:
    fields = dict(draft.fields)
    fields[group] = items
    return draft.evolve(fields=fields)


def next_field_key(existing: tuple[PassField, ...]) -> str:
    """Smallest ``field_<n>`` key not used in *existing*."""
    used = {item.key for item in existing}
    n = len(existing) + 1
    while f"{FIELD_KEY_PREFIX}{n}" in used:
        n += 1
    return f"{FIELD_KEY_PREFIX}{n}"


def add_field(draft: PassDraft, group: FieldGroup | str) -> PassDraft:
    """Append an empty field with a fresh key, if the guard allows it."""
    group = coerce_group(group)
    if not can_add_field(draft, group):
        logger.debug("add_field denied: %s is full for %s", group, draft.style)
        return draft
    current = draft.group(group)
    new_field = PassField(key=next_field_key(current))
    return _replace_group(draft, group, (*current, new_field))


def append_field(draft: PassDraft, group: FieldGroup | str, item: PassField) -> PassDraft:
    """Append a fully specified field, if the guard allows and its key is free."""
    group = coerce_group(group)
    if not can_add_field(draft, group):
        return draft
    if draft.find_field(group, item.key) is not None:
        return draft
    return _replace_group(draft, group, (*draft.group(group), item))


def update_field(
    draft: PassDraft,
    group: FieldGroup | str,
    index: int,
    patch: Mapping[str, Any],
) -> PassDraft:
    """Merge *patch* into the field at *index*.

    Unchanged when *index* is out of range or when the patch renames the
    field to a key already used elsewhere in the group.
    """
    group = coerce_group(group)
    current = draft.group(group)
    if not 0 <= index < len(current):
        logger.debug("update_field ignored: index %d out of range for %s", index, group)
        return draft

    target = current[index]
    new_key = patch.get("key", target.key)
    if new_key != target.key and any(item.key == new_key for item in current):
        logger.debug("update_field ignored: key %r already used in %s", new_key, group)
        return draft

    updated = PassField.model_validate({**target.model_dump(), **patch})
    items = (*current[:index], updated, *current[index + 1 :])
    return _replace_group(draft, group, items)


def remove_field(draft: PassDraft, group: FieldGroup | str, index: int) -> PassDraft:
    """Remove the field at *index*, preserving the order of the rest."""
    group = coerce_group(group)
    current = draft.group(group)
    if not 0 <= index < len(current):
        return draft
    return _replace_group(draft, group, (*current[:index], *current[index + 1 :]))


def move_field(
    draft: PassDraft,
    source: FieldGroup | str,
    index: int,
    target: FieldGroup | str,
) -> PassDraft:
    """Move one field to the end of another group.

    Unchanged on bad index, full target group or key collision.
    """
    source, target = coerce_group(source), coerce_group(target)
    items = draft.group(source)
    if source == target or not 0 <= index < len(items):
        return draft
    moved = items[index]
    without = remove_field(draft, source, index)
    result = append_field(without, target, moved)
    if result is without:
        return draft
    return result


def set_image(draft: PassDraft, slot: ImageSlot | str, ref: ImageRef | None) -> PassDraft:
    """Set or clear (``ref=None``) an image slot.

    Slot legality per style is not enforced here; the validator warns and
    the renderers skip disallowed slots.
    """
    slot = coerce_slot(slot)
    images = dict(draft.images)
    if ref is None:
        if slot not in images:
            return draft
        del images[slot]
    else:
        images[slot] = ref
    return draft.evolve(images=images)


def set_colors(draft: PassDraft, patch: Mapping[str, Any]) -> PassDraft:
    colors = PassColors.model_validate({**draft.colors.model_dump(), **patch})
    return draft.evolve(colors=colors)


def set_content(draft: PassDraft, patch: Mapping[str, Any]) -> PassDraft:
    content = PassContent.model_validate({**draft.content.model_dump(), **patch})
    return draft.evolve(content=content)


def set_barcode(draft: PassDraft, patch: Mapping[str, Any]) -> PassDraft:
    barcode = BarcodeConfig.model_validate({**draft.barcode.model_dump(), **patch})
    return draft.evolve(barcode=barcode)


def set_stamp_config(
    draft: PassDraft,
    *,
    current: int | None = None,
    total: int | None = None,
    icon: str | None = None,
    inactive_icon: str | None = None,
) -> PassDraft:
    """Write a clamped StampConfig, merging with the existing one.

    ``current`` is clamped into ``[0, total]`` and ``total`` to at least 1;
    nothing is rejected. Styles without stamp support are left unchanged.
    """
    if not supports_stamps(draft.style):
        return draft
    base = (draft.stamp_config or StampConfig()).model_dump()
    changes = {
        "current": current,
        "total": total,
        "icon": icon,
        "inactive_icon": inactive_icon,
    }
    base.update({k: v for k, v in changes.items() if v is not None})
    return draft.evolve(stamp_config=StampConfig.model_validate(base))


def change_style(draft: PassDraft, style: PassStyle | str) -> PassDraft:
    """Re-tag the draft with another style.

    Images and fields stay as they are so the validator can report what
    no longer fits. The stamp config is dropped when the new style does
    not support stamps.
    """
    style = coerce_style(style)
    if style == draft.style:
        return draft
    update: dict[str, Any] = {"meta": DraftMeta(style=style, template_id=draft.meta.template_id)}
    if not supports_stamps(style):
        update["stamp_config"] = None
    return draft.evolve(**update)


def add_location(draft: PassDraft, location: PassLocation) -> PassDraft:
    """Append a relevant location; a full list leaves the draft unchanged."""
    if not can_add_location(draft):
        logger.debug("add_location denied: %d locations already set", MAX_LOCATIONS)
        return draft
    locations = (*draft.relevance.locations, location)
    return draft.evolve(relevance=draft.relevance.model_copy(update={"locations": locations}))


def remove_location(draft: PassDraft, index: int) -> PassDraft:
    locations = draft.relevance.locations
    if not 0 <= index < len(locations):
        return draft
    remaining = locations[:index] + locations[index + 1 :]
    return draft.evolve(relevance=draft.relevance.model_copy(update={"locations": remaining}))


def set_relevance(draft: PassDraft, patch: Mapping[str, Any]) -> PassDraft:
    """Merge ``relevant_date`` / ``max_distance`` into the relevance block.

    A ``None`` value clears the entry. Locations are normally managed with
    :func:`add_location` and :func:`remove_location`.
    """
    relevance = Relevance.model_validate({**draft.relevance.model_dump(), **patch})
    if relevance == draft.relevance:
        return draft
    return draft.evolve(relevance=relevance)
