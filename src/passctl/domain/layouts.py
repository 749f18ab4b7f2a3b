"""Layout registry — per-style structural rules.

Both wallet platforms impose hard ceilings on the visible text regions
and on which images a style may carry. This registry is the single
source of truth for those rules: the capacity guard, the validator and
both preview renderers read it and never hard-code limits themselves.

Definitions are built once at import time and are read-only thereafter.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from passctl.domain.errors import UnknownPassStyleError
from passctl.domain.types import FieldGroup, ImageSlot, PassStyle, coerce_slot

if TYPE_CHECKING:
    from passctl.domain.draft import ImageRef

UNLIMITED = -1


@dataclass(frozen=True)
class LayoutRules:
    """Cross-slot and cross-region rules for one style."""

    # Setting a strip hides background and thumbnail (strip wins).
    strip_blocks_background_and_thumbnail: bool = False
    # With a square barcode, secondary + auxiliary together hold at most 4.
    square_barcode_reduces_fields: bool = False


@dataclass(frozen=True)
class ImageSize:
    """Recommended image size in points."""

    width: int
    height: int


@dataclass(frozen=True)
class LayoutDefinition:
    """Immutable rule set for one pass style."""

    style: PassStyle
    display_name: str
    description: str
    field_limits: Mapping[FieldGroup, int]
    allowed_images: frozenset[ImageSlot]
    rules: LayoutRules = field(default_factory=LayoutRules)
    image_sizes: Mapping[ImageSlot, ImageSize] = field(default_factory=dict)

    def limit_for(self, group: FieldGroup) -> int:
        """Field ceiling for *group*; ``UNLIMITED`` (-1) means no ceiling."""
        return self.field_limits[FieldGroup(group)]

    def is_unlimited(self, group: FieldGroup) -> bool:
        return self.limit_for(group) == UNLIMITED


# Combined secondary + auxiliary ceiling under a square barcode.
SQUARE_BARCODE_COMBINED_LIMIT = 4


def _limits(
    *,
    header: int = 3,
    primary: int = 1,
    secondary: int = 4,
    auxiliary: int = 4,
    back: int = UNLIMITED,
) -> Mapping[FieldGroup, int]:
    return MappingProxyType(
        {
            FieldGroup.HEADER: header,
            FieldGroup.PRIMARY: primary,
            FieldGroup.SECONDARY: secondary,
            FieldGroup.AUXILIARY: auxiliary,
            FieldGroup.BACK: back,
        }
    )


_LOGO = ImageSize(160, 50)
_ICON = ImageSize(29, 29)

LAYOUT_DEFINITIONS: Mapping[PassStyle, LayoutDefinition] = MappingProxyType(
    {
        PassStyle.STORE_CARD: LayoutDefinition(
            style=PassStyle.STORE_CARD,
            display_name="Kundenkarte",
            description="Stempelkarten, Bonuskarten, Treuekarten",
            field_limits=_limits(),
            allowed_images=frozenset({ImageSlot.LOGO, ImageSlot.ICON, ImageSlot.STRIP}),
            rules=LayoutRules(
                strip_blocks_background_and_thumbnail=True,
                square_barcode_reduces_fields=True,
            ),
            image_sizes=MappingProxyType(
                {
                    ImageSlot.LOGO: _LOGO,
                    ImageSlot.ICON: _ICON,
                    ImageSlot.STRIP: ImageSize(375, 144),
                }
            ),
        ),
        PassStyle.COUPON: LayoutDefinition(
            style=PassStyle.COUPON,
            display_name="Gutschein",
            description="Rabatte, Coupons, Angebote",
            field_limits=_limits(),
            allowed_images=frozenset({ImageSlot.LOGO, ImageSlot.ICON, ImageSlot.STRIP}),
            rules=LayoutRules(
                strip_blocks_background_and_thumbnail=True,
                square_barcode_reduces_fields=True,
            ),
            image_sizes=MappingProxyType(
                {
                    ImageSlot.LOGO: _LOGO,
                    ImageSlot.ICON: _ICON,
                    ImageSlot.STRIP: ImageSize(375, 144),
                }
            ),
        ),
        PassStyle.EVENT_TICKET: LayoutDefinition(
            style=PassStyle.EVENT_TICKET,
            display_name="Event-Ticket",
            description="Konzerte, Events, Kino",
            field_limits=_limits(),
            allowed_images=frozenset(
                {
                    ImageSlot.LOGO,
                    ImageSlot.ICON,
                    ImageSlot.STRIP,
                    ImageSlot.THUMBNAIL,
                    ImageSlot.BACKGROUND,
                }
            ),
            rules=LayoutRules(),
            image_sizes=MappingProxyType(
                {
                    ImageSlot.LOGO: _LOGO,
                    ImageSlot.ICON: _ICON,
                    ImageSlot.STRIP: ImageSize(375, 98),
                    ImageSlot.THUMBNAIL: ImageSize(90, 90),
                    ImageSlot.BACKGROUND: ImageSize(180, 220),
                }
            ),
        ),
        PassStyle.GENERIC: LayoutDefinition(
            style=PassStyle.GENERIC,
            display_name="Mitgliedschaft",
            description="VIP-Karten, Mitgliedsausweise, Club-Karten",
            field_limits=_limits(),
            allowed_images=frozenset({ImageSlot.LOGO, ImageSlot.ICON, ImageSlot.THUMBNAIL}),
            rules=LayoutRules(square_barcode_reduces_fields=True),
            image_sizes=MappingProxyType(
                {
                    ImageSlot.LOGO: _LOGO,
                    ImageSlot.ICON: _ICON,
                    ImageSlot.THUMBNAIL: ImageSize(90, 90),
                }
            ),
        ),
    }
)


def get_layout_definition(style: PassStyle | str) -> LayoutDefinition:
    """Return the layout definition for *style*.

    Raises:
        UnknownPassStyleError: *style* is not a known PassStyle.
    """
    try:
        return LAYOUT_DEFINITIONS[PassStyle(style)]
    except (ValueError, KeyError) as exc:
        raise UnknownPassStyleError(style) from exc


def is_image_allowed(style: PassStyle | str, slot: ImageSlot | str) -> bool:
    """Whether *slot* may carry an image for *style*."""
    return coerce_slot(slot) in get_layout_definition(style).allowed_images


def blocked_by_strip(
    style: PassStyle | str,
    images: Mapping[ImageSlot, object],
) -> frozenset[ImageSlot]:
    """Slots suppressed by the strip exclusion rule for this image set.

    Empty unless the style enables ``strip_blocks_background_and_thumbnail``
    and a strip image is set.
    """
    definition = get_layout_definition(style)
    if not definition.rules.strip_blocks_background_and_thumbnail:
        return frozenset()
    if images.get(ImageSlot.STRIP) is None:
        return frozenset()
    return frozenset({ImageSlot.BACKGROUND, ImageSlot.THUMBNAIL})


def visible_images(
    style: PassStyle | str,
    images: Mapping[ImageSlot, ImageRef],
) -> dict[ImageSlot, ImageRef]:
    """Images a renderer may draw for *style*.

    Drops slots the style does not allow, then applies the strip
    exclusion rule. Both preview renderers resolve images through this
    function so the strip tie-break is evaluated in exactly one place.
    """
    definition = get_layout_definition(style)
    blocked = blocked_by_strip(style, images)
    visible: dict[ImageSlot, ImageRef] = {}
    for raw_slot, ref in images.items():
        slot = coerce_slot(raw_slot)
        if ref is None or slot not in definition.allowed_images or slot in blocked:
            continue
        visible[slot] = ref
    return visible
