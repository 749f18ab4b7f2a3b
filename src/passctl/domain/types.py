"""Pass vocabulary enums.

Closed enumerations for pass styles, field regions, image slots,
barcode formats and text alignment. Values match the PassKit keys so
drafts serialize to the names both wallet platforms understand.
"""

from __future__ import annotations

from enum import StrEnum


class PassStyle(StrEnum):
    """Pass style; selects the layout rules applied everywhere downstream."""

    STORE_CARD = "storeCard"
    COUPON = "coupon"
    EVENT_TICKET = "eventTicket"
    GENERIC = "generic"


class FieldGroup(StrEnum):
    """Named text region of a pass. Rendering order = tuple order."""

    HEADER = "headerFields"
    PRIMARY = "primaryFields"
    SECONDARY = "secondaryFields"
    AUXILIARY = "auxiliaryFields"
    BACK = "backFields"


class ImageSlot(StrEnum):
    """Image placement point on a pass."""

    LOGO = "logo"
    ICON = "icon"
    STRIP = "strip"
    THUMBNAIL = "thumbnail"
    BACKGROUND = "background"
    FOOTER = "footer"


class BarcodeFormat(StrEnum):
    """Barcode symbologies supported by both wallets."""

    QR = "PKBarcodeFormatQR"
    AZTEC = "PKBarcodeFormatAztec"
    PDF417 = "PKBarcodeFormatPDF417"
    CODE128 = "PKBarcodeFormatCode128"


class TextAlignment(StrEnum):
    """Field text alignment."""

    LEFT = "PKTextAlignmentLeft"
    CENTER = "PKTextAlignmentCenter"
    RIGHT = "PKTextAlignmentRight"
    NATURAL = "PKTextAlignmentNatural"


SQUARE_BARCODE_FORMATS: frozenset[BarcodeFormat] = frozenset(
    {BarcodeFormat.QR, BarcodeFormat.AZTEC}
)

# Styles that carry a StampConfig and support stamp synthesis.
STAMP_STYLES: frozenset[PassStyle] = frozenset({PassStyle.STORE_CARD, PassStyle.EVENT_TICKET})


def is_square_barcode(barcode_format: BarcodeFormat) -> bool:
    """Square symbologies (QR, Aztec) take more vertical space on the pass."""
    return barcode_format in SQUARE_BARCODE_FORMATS


def supports_stamps(style: PassStyle) -> bool:
    return style in STAMP_STYLES


def coerce_style(style: PassStyle | str) -> PassStyle:
    """Convert *style* to a PassStyle, failing fast on unknown names."""
    from passctl.domain.errors import UnknownPassStyleError

    try:
        return PassStyle(style)
    except ValueError as exc:
        raise UnknownPassStyleError(style) from exc


def coerce_group(group: FieldGroup | str) -> FieldGroup:
    """Convert *group* to a FieldGroup, failing fast on unknown names."""
    from passctl.domain.errors import UnknownFieldGroupError

    try:
        return FieldGroup(group)
    except ValueError as exc:
        raise UnknownFieldGroupError(group) from exc


def coerce_slot(slot: ImageSlot | str) -> ImageSlot:
    """Convert *slot* to an ImageSlot, failing fast on unknown names."""
    from passctl.domain.errors import UnknownImageSlotError

    try:
        return ImageSlot(slot)
    except ValueError as exc:
        raise UnknownImageSlotError(slot) from exc
