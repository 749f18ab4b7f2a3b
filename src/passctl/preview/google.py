"""Google-style preview renderer.

One vertically stacked card: logo and name, program title, the first
primary field, the barcode, then a full-bleed image band. The Google
surface intentionally shows less than the Apple front; the draft is a
superset and each renderer projects what it can display faithfully.
"""

from __future__ import annotations

from collections.abc import Mapping

from passctl.domain.draft import ImageRef, PassDraft
from passctl.domain.layouts import visible_images
from passctl.domain.types import FieldGroup, ImageSlot
from passctl.preview.layout import BarcodeRegion, GooglePreview, ImageBand, PreviewField

DEFAULT_NAME = "Loyalty Card"
IMAGE_PLACEHOLDER = "No banner image"

# Image band sources in priority order.
_BAND_SLOTS = (ImageSlot.STRIP, ImageSlot.BACKGROUND)


def _image_band(images: Mapping[ImageSlot, ImageRef], *, placeholder: str) -> ImageBand:
    for slot in _BAND_SLOTS:
        ref = images.get(slot)
        if ref is not None:
            return ImageBand(slot=slot, image=ref)
    return ImageBand(placeholder=placeholder)


def render_google(draft: PassDraft, *, placeholder: str = IMAGE_PLACEHOLDER) -> GooglePreview:
    """Project *draft* onto the Google Wallet card."""
    content = draft.content
    name = content.logo_text or content.organization_name or DEFAULT_NAME
    primary = draft.group(FieldGroup.PRIMARY)
    images = visible_images(draft.style, draft.images)
    return GooglePreview(
        style=draft.style,
        colors=draft.colors,
        logo=images.get(ImageSlot.LOGO),
        name=name,
        title=content.description or name,
        primary=PreviewField.from_field(primary[0]) if primary else None,
        barcode=BarcodeRegion.from_draft(draft),
        image_band=_image_band(images, placeholder=placeholder),
    )
