"""Command group: image slots."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassGroup
from passctl.commands._choices import SLOT_CHOICE

if TYPE_CHECKING:
    from passctl.commands._context import AppContext

_IMAGE_EXAMPLES = """\
  passctl image set logo https://cdn.example.com/logo.png
  passctl image set strip ./assets/strip@2x.png --name strip@2x.png
  passctl image clear thumbnail"""


@click.group(cls=PassGroup, examples=_IMAGE_EXAMPLES)
@click.pass_obj
def image(app: AppContext) -> None:
    """Set or clear pass images."""


@image.command(
    "set",
    examples="""\
  passctl image set logo https://cdn.example.com/logo.png
  passctl image set background ./bg.png --name background.png""",
)
@click.argument("slot", type=SLOT_CHOICE)
@click.argument("url")
@click.option("--name", "file_name", default=None, help="File name inside the pass bundle.")
@click.pass_obj
def set_image(app: AppContext, slot: str, url: str, file_name: str | None) -> None:
    """Point SLOT at the image at URL."""
    app.emit(app.drafts.set_image(slot.lower(), url, file_name))


@image.command(
    "clear",
    examples="""\
  passctl image clear strip""",
)
@click.argument("slot", type=SLOT_CHOICE)
@click.pass_obj
def clear_image(app: AppContext, slot: str) -> None:
    """Remove the image in SLOT."""
    app.emit(app.drafts.clear_image(slot.lower()))
