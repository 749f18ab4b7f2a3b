"""Commands: colors, content, barcode and style of the draft."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassCommand, collect_changes
from passctl.commands._choices import BARCODE_CHOICE, BARCODE_FORMATS, STYLE_CHOICE

if TYPE_CHECKING:
    from passctl.commands._context import AppContext


@click.command(
    cls=PassCommand,
    examples="""\
  passctl colors --background "#0F0F0F" --foreground "#FFFFFF"
  passctl colors --label "#22C55E" """,
)
@click.option("--background", default=None, help="Background color.")
@click.option("--foreground", default=None, help="Value text color.")
@click.option("--label", default=None, help="Label text color.")
@click.pass_obj
def colors(
    app: AppContext,
    background: str | None,
    foreground: str | None,
    label: str | None,
) -> None:
    """Set pass colors."""
    changes = collect_changes(
        background_color=background,
        foreground_color=foreground,
        label_color=label,
    )
    app.emit(app.drafts.set_colors(changes))


@click.command(
    cls=PassCommand,
    examples="""\
  passctl content --description "Digitale Stempelkarte" --organization "Café Nord"
  passctl content --logo-text "Café Nord"
  passctl content --hide-logo-text""",
)
@click.option("--description", default=None, help="Accessibility description (required).")
@click.option("--organization", default=None, help="Issuing organization.")
@click.option("--logo-text", default=None, help="Text beside the logo.")
@click.option(
    "--hide-logo-text/--show-logo-text",
    default=None,
    help="Hide or show the logo text.",
)
@click.pass_obj
def content(
    app: AppContext,
    description: str | None,
    organization: str | None,
    logo_text: str | None,
    hide_logo_text: bool | None,
) -> None:
    """Set descriptive pass content."""
    changes = collect_changes(
        description=description,
        organization_name=organization,
        logo_text=logo_text,
        hide_logo_text=hide_logo_text,
    )
    app.emit(app.drafts.set_content(changes))


@click.command(
    cls=PassCommand,
    examples="""\
  passctl barcode --message "CUST-0042"
  passctl barcode --format code128 --alt-text "0042" """,
)
@click.option("--message", default=None, help="Encoded payload.")
@click.option("--format", "barcode_format", type=BARCODE_CHOICE, default=None, help="Symbology.")
@click.option("--encoding", default=None, help="Message encoding.")
@click.option("--alt-text", default=None, help="Text printed under the barcode.")
@click.pass_obj
def barcode(
    app: AppContext,
    message: str | None,
    barcode_format: str | None,
    encoding: str | None,
    alt_text: str | None,
) -> None:
    """Configure the barcode."""
    changes = collect_changes(
        message=message,
        format=BARCODE_FORMATS[barcode_format.lower()] if barcode_format else None,
        message_encoding=encoding,
        alt_text=alt_text,
    )
    app.emit(app.drafts.set_barcode(changes))


@click.command(
    cls=PassCommand,
    examples="""\
  passctl style eventTicket
  passctl style generic""",
)
@click.argument("new_style", metavar="STYLE", type=STYLE_CHOICE)
@click.pass_obj
def style(app: AppContext, new_style: str) -> None:
    """Switch the draft to another pass STYLE."""
    app.emit(app.drafts.change_style(new_style))
