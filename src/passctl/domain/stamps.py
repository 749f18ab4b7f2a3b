"""Stamp-progress synthesizer.

Turns the numeric StampConfig into the fields the wallets display:

- primary ``stamps``: text progress (``"3 von 10"`` / ``"3 / 10"``)
- auxiliary ``progress_visual``: glyph progress (``"🟢 🟢 ⚪ ..."``)

INVARIANT: StampConfig is the single source of truth. The rendered
strings are outputs only and are never parsed back into numbers.

Synthesis runs on explicit request, not on every keystroke. When a
target group is full and the keyed field does not exist yet, that field
is skipped silently; the validator reports the gap as a warning.
"""

from __future__ import annotations

import logging
from typing import assert_never

from passctl.domain.draft import PassDraft, PassField, StampConfig
from passctl.domain.mutations import append_field, move_field, update_field
from passctl.domain.types import FieldGroup, PassStyle, TextAlignment, supports_stamps

logger = logging.getLogger(__name__)

STAMPS_KEY = "stamps"
PROGRESS_VISUAL_KEY = "progress_visual"
POWERED_KEY = "powered"

DEFAULT_PRIMARY_LABEL = "DEINE STEMPEL"
DEFAULT_PROGRESS_LABEL = "progress"


def clamp_current(config: StampConfig) -> int:
    return min(max(0, config.current), config.total)


def stamp_text(style: PassStyle, config: StampConfig) -> str:
    """Text progress for *style*.

    Raises:
        ValueError: *style* does not support stamps.
    """
    current = clamp_current(config)
    match style:
        case PassStyle.STORE_CARD:
            return f"{current} von {config.total}"
        case PassStyle.EVENT_TICKET:
            return f"{current} / {config.total}"
        case PassStyle.COUPON | PassStyle.GENERIC:
            msg = f"{style} does not support stamp progress"
            raise ValueError(msg)
        case _:
            assert_never(style)


def stamp_visual(config: StampConfig) -> str:
    """Active glyphs then inactive glyphs, single-space separated."""
    current = clamp_current(config)
    glyphs = [config.icon] * current + [config.inactive_icon] * (config.total - current)
    return " ".join(glyphs)


def _write_keyed_value(
    draft: PassDraft,
    group: FieldGroup,
    key: str,
    value: str,
    *,
    new_field: PassField,
) -> PassDraft:
    """Update the value of *key* in *group*, or append *new_field* if capacity allows."""
    index = draft.find_field(group, key)
    if index is not None:
        return update_field(draft, group, index, {"value": value})
    result = append_field(draft, group, new_field)
    if result is draft:
        logger.info("stamp synthesis skipped %s: %s is full", key, group)
    return result


def relocate_powered_field(draft: PassDraft) -> PassDraft:
    """Move an auxiliary ``powered`` field into secondary.

    When secondary already has a ``powered`` field the auxiliary copy is
    dropped instead. When secondary is full the field stays where it is.
    """
    aux_index = draft.find_field(FieldGroup.AUXILIARY, POWERED_KEY)
    if aux_index is None:
        return draft
    if draft.find_field(FieldGroup.SECONDARY, POWERED_KEY) is not None:
        fields = dict(draft.fields)
        aux = draft.group(FieldGroup.AUXILIARY)
        fields[FieldGroup.AUXILIARY] = (*aux[:aux_index], *aux[aux_index + 1 :])
        return draft.evolve(fields=fields)
    return move_field(draft, FieldGroup.AUXILIARY, aux_index, FieldGroup.SECONDARY)


def synthesize_stamp_progress(
    draft: PassDraft,
    *,
    primary_label: str = DEFAULT_PRIMARY_LABEL,
    progress_label: str = DEFAULT_PROGRESS_LABEL,
) -> PassDraft:
    """Write text and glyph progress derived from ``draft.stamp_config``.

    Returns the draft unchanged when the style has no stamp support or
    no stamp config is set. Existing keyed fields keep their label and
    alignment; only the value is replaced.
    """
    config = draft.stamp_config
    if config is None or not supports_stamps(draft.style):
        return draft

    text = stamp_text(draft.style, config)
    visual = stamp_visual(config)

    result = _write_keyed_value(
        draft,
        FieldGroup.PRIMARY,
        STAMPS_KEY,
        text,
        new_field=PassField(key=STAMPS_KEY, label=primary_label, value=text),
    )
    result = relocate_powered_field(result)
    result = _write_keyed_value(
        result,
        FieldGroup.AUXILIARY,
        PROGRESS_VISUAL_KEY,
        visual,
        new_field=PassField(
            key=PROGRESS_VISUAL_KEY,
            label=progress_label,
            value=visual,
            text_alignment=TextAlignment.CENTER,
        ),
    )
    return result
