"""Template catalog — named starting points for a new draft.

Templates are code-baked. ``create_draft_from_template`` returns None
for an unknown id so callers can report it as user input, not a crash.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from passctl.domain.draft import (
    BarcodeConfig,
    DraftMeta,
    PassColors,
    PassContent,
    PassDraft,
    PassField,
    StampConfig,
)
from passctl.domain.stamps import STAMPS_KEY
from passctl.domain.types import FieldGroup, PassStyle, TextAlignment, coerce_style


@dataclass(frozen=True)
class PassTemplate:
    """A named draft preset for one style."""

    id: str
    name: str
    description: str
    style: PassStyle
    colors: PassColors
    content: PassContent
    fields: dict[FieldGroup, tuple[PassField, ...]] = field(default_factory=dict)
    barcode: BarcodeConfig = field(default_factory=BarcodeConfig)
    stamp_config: StampConfig | None = None

    def summary(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "style": str(self.style),
        }


def _f(key: str, label: str, value: str, **kwargs: Any) -> PassField:
    return PassField(key=key, label=label, value=value, **kwargs)


_POWERED = _f("powered", "POWERED BY", "QARD")

PASS_TEMPLATES: tuple[PassTemplate, ...] = (
    PassTemplate(
        id="stempelkarte",
        name="Stempelkarte",
        description="Klassische Stempelkarte - 10 Stempel sammeln",
        style=PassStyle.STORE_CARD,
        colors=PassColors(
            background_color="#0F0F0F",
            foreground_color="#FFFFFF",
            label_color="#22C55E",
        ),
        content=PassContent(description="Digitale Stempelkarte"),
        fields={
            FieldGroup.PRIMARY: (_f(STAMPS_KEY, "DEINE STEMPEL", "0 von 10"),),
            FieldGroup.SECONDARY: (_f("reward", "PRÄMIE", "Gratis Kaffee"),),
            FieldGroup.AUXILIARY: (_POWERED,),
            FieldGroup.BACK: (
                _f(
                    "howto",
                    "SO FUNKTIONIERT'S",
                    "Bei jedem Besuch den QR-Code scannen lassen. "
                    "Nach 10 Stempeln erhältst du deinen Gratis Kaffee!",
                ),
            ),
        },
        stamp_config=StampConfig(current=0),
    ),
    PassTemplate(
        id="stempelkarte_v2",
        name="Stempelkarte 2.0",
        description="Modernes Design mit Hintergrundbild (Event Ticket Style)",
        style=PassStyle.EVENT_TICKET,
        colors=PassColors(
            background_color="#1A1A1A",
            foreground_color="#FFFFFF",
            label_color="#FFD700",
        ),
        content=PassContent(description="Premium Stempelkarte"),
        fields={
            FieldGroup.PRIMARY: (_f(STAMPS_KEY, "DEINE STEMPEL", "0 / 10"),),
            FieldGroup.SECONDARY: (_f("reward", "NÄCHSTE PRÄMIE", "Gratis Kaffee"),),
            FieldGroup.AUXILIARY: (
                _f(
                    "progress_visual",
                    "FORTSCHRITT",
                    " ".join(["⚪"] * 10),
                    text_alignment=TextAlignment.CENTER,
                ),
                _POWERED,
            ),
        },
        stamp_config=StampConfig(current=0),
    ),
    PassTemplate(
        id="mitgliederkarte",
        name="Mitgliederkarte",
        description="VIP-Karte für Club, Verein oder Treue-Mitglieder",
        style=PassStyle.GENERIC,
        colors=PassColors(
            background_color="#0A0A0A",
            foreground_color="#F5DEB3",
            label_color="#D4AF37",
        ),
        content=PassContent(description="Premium Mitgliederkarte"),
        fields={
            FieldGroup.HEADER: (_f("status", "STATUS", "MEMBER"),),
            FieldGroup.PRIMARY: (_f("name", "MITGLIED", "Dein Name"),),
            FieldGroup.SECONDARY: (
                _f("nr", "MITGLIEDS-NR", "M-2024-0001"),
                _f("since", "DABEI SEIT", "2024"),
            ),
            FieldGroup.AUXILIARY: (_POWERED,),
            FieldGroup.BACK: (
                _f(
                    "benefits",
                    "DEINE VORTEILE",
                    "✓ Exklusive Rabatte\n✓ Frühzugang zu Events\n✓ Punkte sammeln",
                ),
            ),
        },
    ),
    PassTemplate(
        id="gutschein",
        name="Gutschein",
        description="Rabattgutschein oder Einmalgutschein",
        style=PassStyle.COUPON,
        colors=PassColors(
            background_color="#18181B",
            foreground_color="#FFFFFF",
            label_color="#F43F5E",
        ),
        content=PassContent(description="Digitaler Gutschein"),
        fields={
            FieldGroup.HEADER: (_f("type", "COUPON", ""),),
            FieldGroup.PRIMARY: (_f("value", "RABATT", "20%"),),
            FieldGroup.SECONDARY: (
                _f("valid", "GÜLTIG BIS", "31.12.2025"),
                _f("min", "AB", "20€ MBW"),
            ),
            FieldGroup.AUXILIARY: (_POWERED,),
            FieldGroup.BACK: (
                _f(
                    "terms",
                    "BEDINGUNGEN",
                    "Einmalig einlösbar. Nicht mit anderen Aktionen kombinierbar. "
                    "Nur im Ladengeschäft gültig.",
                ),
            ),
        },
        barcode=BarcodeConfig(message="COUPON-2024"),
    ),
    PassTemplate(
        id="punktekarte",
        name="Punktekarte",
        description="Punkte sammeln und einlösen",
        style=PassStyle.STORE_CARD,
        colors=PassColors(
            background_color="#0F172A",
            foreground_color="#E2E8F0",
            label_color="#8B5CF6",
        ),
        content=PassContent(description="Punktekarte"),
        fields={
            FieldGroup.HEADER: (_f("level", "LEVEL", "Bronze"),),
            FieldGroup.PRIMARY: (_f("points", "PUNKTE", "0"),),
            FieldGroup.SECONDARY: (
                _f("next", "NÄCHSTES LEVEL", "Silber bei 500"),
                _f("value", "WERT", "0,00 €"),
            ),
            FieldGroup.AUXILIARY: (_POWERED,),
            FieldGroup.BACK: (
                _f(
                    "info",
                    "PUNKTE SAMMELN",
                    "1€ = 1 Punkt\n100 Punkte = 5€ Rabatt\n\nLevel:\n"
                    "• Bronze: 0-499\n• Silber: 500-999\n• Gold: 1000+",
                ),
            ),
        },
    ),
)

_TEMPLATES_BY_ID: dict[str, PassTemplate] = {t.id: t for t in PASS_TEMPLATES}


def list_templates() -> list[PassTemplate]:
    return list(PASS_TEMPLATES)


def get_template(template_id: str) -> PassTemplate | None:
    return _TEMPLATES_BY_ID.get(template_id)


def templates_for_style(style: PassStyle | str) -> list[PassTemplate]:
    style = coerce_style(style)
    return [t for t in PASS_TEMPLATES if t.style == style]


def create_default_draft(style: PassStyle | str) -> PassDraft:
    """Blank draft for *style* with neutral colors and no fields."""
    return PassDraft(meta=DraftMeta(style=coerce_style(style)))


def create_draft_from_template(template_id: str) -> PassDraft | None:
    """Instantiate a fresh draft from a catalog template, or None for an unknown id.

    Stamp templates carry their own StampConfig, matching the progress
    text already printed in their ``stamps`` field.
    """
    template = get_template(template_id)
    if template is None:
        return None

    return PassDraft(
        meta=DraftMeta(style=template.style, template_id=template.id),
        content=template.content,
        colors=template.colors,
        fields=dict(template.fields),
        barcode=template.barcode,
        stamp_config=template.stamp_config,
    )
