"""Apple-style preview renderer.

Front face::

    [LOGO]                 HEADER FIELDS ->
    style-dependent body (dispatch per PassStyle)
    [BARCODE]

- storeCard / coupon: strip band with the primary field on top of it,
  then one combined secondary + auxiliary row.
- eventTicket: optional strip band, stacked primary / secondary /
  auxiliary, thumbnail beside the primary field, background backdrop.
- generic: primary field beside the thumbnail, no strip.

Region sizes come from the layout registry; overflowing fields are not
drawn, as on the real wallet.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import assert_never

from passctl.domain.draft import ImageRef, PassDraft
from passctl.domain.layouts import LayoutDefinition, get_layout_definition, visible_images
from passctl.domain.types import FieldGroup, ImageSlot, PassStyle
from passctl.preview.layout import (
    AppleBack,
    AppleBody,
    AppleFront,
    AppleHeader,
    BarcodeRegion,
    FieldRow,
    ImageBand,
    PreviewField,
)

STRIP_PLACEHOLDER = "Strip image"
BACK_EMPTY_MESSAGE = "No back-side information"


def _visible_fields(
    draft: PassDraft,
    definition: LayoutDefinition,
    group: FieldGroup,
) -> list[PreviewField]:
    items = draft.group(group)
    if not definition.is_unlimited(group):
        items = items[: definition.limit_for(group)]
    return [PreviewField.from_field(item) for item in items]


def _logo_text(draft: PassDraft) -> str | None:
    if draft.content.hide_logo_text:
        return None
    return draft.content.logo_text or draft.content.organization_name or None


def _header(
    draft: PassDraft,
    definition: LayoutDefinition,
    images: Mapping[ImageSlot, ImageRef],
) -> AppleHeader:
    return AppleHeader(
        logo=images.get(ImageSlot.LOGO),
        logo_text=_logo_text(draft),
        fields=_visible_fields(draft, definition, FieldGroup.HEADER),
    )


def _strip_band(images: Mapping[ImageSlot, ImageRef], *, placeholder: bool) -> ImageBand | None:
    strip = images.get(ImageSlot.STRIP)
    if strip is not None:
        return ImageBand(slot=ImageSlot.STRIP, image=strip)
    if placeholder:
        return ImageBand(placeholder=STRIP_PLACEHOLDER)
    return None


def _strip_card_body(
    draft: PassDraft,
    definition: LayoutDefinition,
    images: Mapping[ImageSlot, ImageRef],
) -> AppleBody:
    bottom = _visible_fields(draft, definition, FieldGroup.SECONDARY) + _visible_fields(
        draft, definition, FieldGroup.AUXILIARY
    )
    return AppleBody(
        strip=_strip_band(images, placeholder=True),
        primary=_visible_fields(draft, definition, FieldGroup.PRIMARY),
        primary_on_strip=True,
        rows=[FieldRow(name="secondary+auxiliary", fields=bottom)] if bottom else [],
    )


def _stacked_rows(draft: PassDraft, definition: LayoutDefinition) -> list[FieldRow]:
    rows: list[FieldRow] = []
    for name, group in (("secondary", FieldGroup.SECONDARY), ("auxiliary", FieldGroup.AUXILIARY)):
        fields = _visible_fields(draft, definition, group)
        if fields:
            rows.append(FieldRow(name=name, fields=fields))
    return rows


def _event_ticket_body(
    draft: PassDraft,
    definition: LayoutDefinition,
    images: Mapping[ImageSlot, ImageRef],
) -> AppleBody:
    return AppleBody(
        strip=_strip_band(images, placeholder=False),
        primary=_visible_fields(draft, definition, FieldGroup.PRIMARY),
        thumbnail=images.get(ImageSlot.THUMBNAIL),
        background=images.get(ImageSlot.BACKGROUND),
        rows=_stacked_rows(draft, definition),
    )


def _generic_body(
    draft: PassDraft,
    definition: LayoutDefinition,
    images: Mapping[ImageSlot, ImageRef],
) -> AppleBody:
    return AppleBody(
        primary=_visible_fields(draft, definition, FieldGroup.PRIMARY),
        thumbnail=images.get(ImageSlot.THUMBNAIL),
        rows=_stacked_rows(draft, definition),
    )


def render_apple_front(draft: PassDraft) -> AppleFront:
    """Project *draft* onto the Apple Wallet front face."""
    definition = get_layout_definition(draft.style)
    images = visible_images(draft.style, draft.images)

    style = draft.style
    match style:
        case PassStyle.STORE_CARD | PassStyle.COUPON:
            body = _strip_card_body(draft, definition, images)
        case PassStyle.EVENT_TICKET:
            body = _event_ticket_body(draft, definition, images)
        case PassStyle.GENERIC:
            body = _generic_body(draft, definition, images)
        case _:
            assert_never(style)

    return AppleFront(
        style=style,
        colors=draft.colors,
        header=_header(draft, definition, images),
        body=body,
        barcode=BarcodeRegion.from_draft(draft),
    )


def render_apple_back(draft: PassDraft, *, empty_message: str = BACK_EMPTY_MESSAGE) -> AppleBack:
    """Project *draft* onto the back face: back fields only."""
    fields = [PreviewField.from_field(item) for item in draft.group(FieldGroup.BACK)]
    return AppleBack(
        style=draft.style,
        colors=draft.colors,
        fields=fields,
        empty_message=None if fields else empty_message,
    )
