"""Short CLI spellings for pass vocabulary enums.

The draft stores PassKit names (``primaryFields``, ``PKBarcodeFormatQR``);
the command line accepts the short forms below.
"""

from __future__ import annotations

import click

from passctl.domain.types import BarcodeFormat, FieldGroup, ImageSlot, PassStyle, TextAlignment

GROUPS: dict[str, FieldGroup] = {g.name.lower(): g for g in FieldGroup}
BARCODE_FORMATS: dict[str, BarcodeFormat] = {f.name.lower(): f for f in BarcodeFormat}
ALIGNMENTS: dict[str, TextAlignment] = {a.name.lower(): a for a in TextAlignment}

GROUP_CHOICE = click.Choice(sorted(GROUPS), case_sensitive=False)
SLOT_CHOICE = click.Choice([s.value for s in ImageSlot], case_sensitive=False)
STYLE_CHOICE = click.Choice([s.value for s in PassStyle])
BARCODE_CHOICE = click.Choice(sorted(BARCODE_FORMATS), case_sensitive=False)
ALIGNMENT_CHOICE = click.Choice(sorted(ALIGNMENTS), case_sensitive=False)


def group_value(name: str) -> str:
    return GROUPS[name.lower()].value
