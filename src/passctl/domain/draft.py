"""Pass draft model — the document an operator edits.

A PassDraft is platform-agnostic: the Apple and Google previews and
any packaging collaborator all read the same structure. Models are
frozen and field groups are tuples, so a draft can only change by
building a new one (see :mod:`passctl.domain.mutations`).

The JSON produced by ``model_dump(mode="json")`` is the interchange
shape for persistence and must round-trip losslessly.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import (
    BaseModel,
    Field,
    SerializerFunctionWrapHandler,
    ValidationInfo,
    field_serializer,
    field_validator,
)

from passctl.domain.types import BarcodeFormat, FieldGroup, ImageSlot, PassStyle, TextAlignment

DEFAULT_STAMP_ICON = "🟢"
DEFAULT_INACTIVE_ICON = "⚪"


class PassField(BaseModel):
    """One labelled value inside a field group.

    ``key`` is unique within its group; the stamp synthesizer and the
    editor both address fields by key.
    """

    model_config = {"frozen": True}

    key: str
    label: str = ""
    value: str = ""
    text_alignment: TextAlignment | None = None


class ImageRef(BaseModel):
    """Reference to an uploaded or generated image."""

    model_config = {"frozen": True}

    url: str
    file_name: str = ""


class BarcodeConfig(BaseModel):
    """Barcode shown on the pass. ``message`` must be non-empty to export."""

    model_config = {"frozen": True}

    format: BarcodeFormat = BarcodeFormat.QR
    message: str = ""
    message_encoding: str = "iso-8859-1"
    alt_text: str | None = None


class StampConfig(BaseModel):
    """Numeric stamp progress; the single source of truth for stamp fields.

    INVARIANT: ``1 <= total`` and ``0 <= current <= total``. Out-of-range
    numbers are clamped on construction; values that are not numbers at
    all (``null``, text) are rejected like any other invalid field.
    """

    model_config = {"frozen": True}

    icon: str = DEFAULT_STAMP_ICON
    inactive_icon: str = DEFAULT_INACTIVE_ICON
    total: int = 10
    current: int = 1

    @field_validator("icon", "inactive_icon", mode="before")
    @classmethod
    def _default_icon(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or value == "":
            return DEFAULT_STAMP_ICON if info.field_name == "icon" else DEFAULT_INACTIVE_ICON
        return value

    @field_validator("total", mode="after")
    @classmethod
    def _clamp_total(cls, value: int) -> int:
        return max(1, value)

    @field_validator("current", mode="after")
    @classmethod
    def _clamp_current(cls, value: int, info: ValidationInfo) -> int:
        total = info.data.get("total", 10)
        return min(max(0, value), total)


class PassColors(BaseModel):
    """Pass colors as CSS hex strings."""

    model_config = {"frozen": True}

    background_color: str = "#1A1A1A"
    foreground_color: str = "#FFFFFF"
    label_color: str = "#999999"


class PassContent(BaseModel):
    """Descriptive text that is not a field."""

    model_config = {"frozen": True}

    description: str = ""
    organization_name: str = ""
    logo_text: str = ""
    hide_logo_text: bool = False


class DraftMeta(BaseModel):
    """Style tag and provenance of a draft."""

    model_config = {"frozen": True}

    style: PassStyle
    template_id: str | None = None


MAX_LOCATIONS = 10


class PassLocation(BaseModel):
    """A place where the pass becomes relevant on the lock screen."""

    model_config = {"frozen": True}

    latitude: float
    longitude: float
    relevant_text: str | None = None


class Relevance(BaseModel):
    """Lock-screen relevance: locations, a date and a distance radius.

    Coordinates are stored as entered; range and count limits are
    reported by the validator so an operator can still fix a bad entry.
    """

    model_config = {"frozen": True}

    locations: tuple[PassLocation, ...] = ()
    relevant_date: str | None = None
    max_distance: int | None = None

    @field_validator("relevant_date", "max_distance", mode="after")
    @classmethod
    def _blank_is_unset(cls, value: str | int | None) -> str | int | None:
        return value or None

    @property
    def is_empty(self) -> bool:
        return not self.locations and self.relevant_date is None and self.max_distance is None


def empty_field_groups() -> dict[FieldGroup, tuple[PassField, ...]]:
    """All five field groups, empty, in canonical order."""
    return {group: () for group in FieldGroup}


class PassDraft(BaseModel):
    """Aggregate root of one pass design.

    ``images`` and ``fields`` are read-only mappings; use :meth:`evolve`
    (or the functions in :mod:`passctl.domain.mutations`) to derive a
    changed draft.
    """

    model_config = {"frozen": True}

    meta: DraftMeta
    content: PassContent = Field(default_factory=PassContent)
    colors: PassColors = Field(default_factory=PassColors)
    images: dict[ImageSlot, ImageRef] = Field(default_factory=dict)
    fields: dict[FieldGroup, tuple[PassField, ...]] = Field(default_factory=empty_field_groups)
    barcode: BarcodeConfig = Field(default_factory=BarcodeConfig)
    stamp_config: StampConfig | None = None
    relevance: Relevance = Field(default_factory=Relevance)

    @field_validator("images", mode="after")
    @classmethod
    def _freeze_images(cls, value: dict[ImageSlot, ImageRef]) -> Mapping[ImageSlot, ImageRef]:
        return MappingProxyType(dict(value))

    @field_validator("fields", mode="after")
    @classmethod
    def _all_groups_present(
        cls, value: dict[FieldGroup, tuple[PassField, ...]]
    ) -> Mapping[FieldGroup, tuple[PassField, ...]]:
        return MappingProxyType({group: tuple(value.get(group, ())) for group in FieldGroup})

    @field_serializer("images", "fields", mode="wrap")
    def _thaw(self, value: Mapping[Any, Any], handler: SerializerFunctionWrapHandler) -> Any:
        return handler(dict(value))

    @property
    def style(self) -> PassStyle:
        return self.meta.style

    def evolve(self, **changes: Any) -> PassDraft:
        """A validated copy of this draft with *changes* applied."""
        data = {name: getattr(self, name) for name in type(self).model_fields}
        data.update(changes)
        data["images"] = dict(data["images"])
        data["fields"] = dict(data["fields"])
        return type(self).model_validate(data)

    def group(self, group: FieldGroup) -> tuple[PassField, ...]:
        """Fields of *group* in rendering order."""
        return self.fields[FieldGroup(group)]

    def find_field(self, group: FieldGroup, key: str) -> int | None:
        """Index of the field with *key* in *group*, or None."""
        for index, item in enumerate(self.group(group)):
            if item.key == key:
                return index
        return None

    def image(self, slot: ImageSlot) -> ImageRef | None:
        return self.images.get(ImageSlot(slot))

    def to_document(self) -> dict[str, Any]:
        """Serialize to the JSON-compatible interchange shape."""
        return self.model_dump(mode="json")

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> PassDraft:
        """Re-hydrate a draft serialized by :meth:`to_document`."""
        return cls.model_validate(data)
