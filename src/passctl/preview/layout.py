"""Layout models produced by the preview renderers.

These are plain data: the CLI draws them with Rich, and any other
front end can serialize them with ``model_dump(mode="json")``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from passctl.domain.draft import ImageRef, PassColors, PassDraft, PassField
from passctl.domain.types import (
    BarcodeFormat,
    ImageSlot,
    PassStyle,
    TextAlignment,
    is_square_barcode,
)


class PreviewField(BaseModel):
    """A field as displayed."""

    model_config = {"frozen": True}

    key: str
    label: str
    value: str
    alignment: TextAlignment | None = None

    @classmethod
    def from_field(cls, item: PassField) -> PreviewField:
        return cls(
            key=item.key,
            label=item.label,
            value=item.value,
            alignment=item.text_alignment,
        )


class FieldRow(BaseModel):
    """A horizontal run of fields."""

    model_config = {"frozen": True}

    name: str
    fields: list[PreviewField] = Field(default_factory=list)


class ImageBand(BaseModel):
    """A full-width image area; ``placeholder`` is set when no image is drawn."""

    model_config = {"frozen": True}

    slot: ImageSlot | None = None
    image: ImageRef | None = None
    placeholder: str | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.image is None


class BarcodeRegion(BaseModel):
    model_config = {"frozen": True}

    format: BarcodeFormat
    message: str
    alt_text: str | None = None
    square: bool = True

    @classmethod
    def from_draft(cls, draft: PassDraft) -> BarcodeRegion:
        return cls(
            format=draft.barcode.format,
            message=draft.barcode.message,
            alt_text=draft.barcode.alt_text,
            square=is_square_barcode(draft.barcode.format),
        )


class AppleHeader(BaseModel):
    """Logo on the left, header fields right-aligned."""

    model_config = {"frozen": True}

    logo: ImageRef | None = None
    logo_text: str | None = None
    fields: list[PreviewField] = Field(default_factory=list)


class AppleBody(BaseModel):
    """Style-dependent front body."""

    model_config = {"frozen": True}

    strip: ImageBand | None = None
    primary: list[PreviewField] = Field(default_factory=list)
    primary_on_strip: bool = False
    thumbnail: ImageRef | None = None
    background: ImageRef | None = None
    rows: list[FieldRow] = Field(default_factory=list)


class AppleFront(BaseModel):
    model_config = {"frozen": True}

    style: PassStyle
    colors: PassColors
    header: AppleHeader
    body: AppleBody
    barcode: BarcodeRegion


class AppleBack(BaseModel):
    """Back face: back fields only, or an empty-state message."""

    model_config = {"frozen": True}

    style: PassStyle
    colors: PassColors
    fields: list[PreviewField] = Field(default_factory=list)
    empty_message: str | None = None


class GooglePreview(BaseModel):
    """Single stacked card; shows the first primary field only."""

    model_config = {"frozen": True}

    style: PassStyle
    colors: PassColors
    logo: ImageRef | None = None
    name: str
    title: str
    primary: PreviewField | None = None
    barcode: BarcodeRegion
    image_band: ImageBand
