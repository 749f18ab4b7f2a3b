"""Commands: list templates, start a draft, show the draft."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassCommand
from passctl.commands._choices import STYLE_CHOICE

if TYPE_CHECKING:
    from passctl.commands._context import AppContext


@click.command(
    cls=PassCommand,
    examples="""\
  passctl templates
  passctl --json templates""",
)
@click.pass_obj
def templates(app: AppContext) -> None:
    """List the built-in pass templates."""
    app.emit(app.drafts.list_templates())


@click.command(
    cls=PassCommand,
    examples="""\
  passctl new
  passctl new gutschein
  passctl new --style generic
  passctl -d loyalty.json new punktekarte --force""",
)
@click.argument("template_id", required=False)
@click.option("--style", type=STYLE_CHOICE, default=None, help="Start blank with this style.")
@click.option("--force", is_flag=True, help="Replace an existing draft.")
@click.pass_obj
def new(app: AppContext, template_id: str | None, style: str | None, force: bool) -> None:
    """Start a new draft from TEMPLATE_ID (or the configured default)."""
    if template_id and style:
        click.echo("Pass either a template or --style, not both.", err=True)
        raise SystemExit(1)
    app.emit(app.drafts.new(template_id, style=style, force=force))


@click.command(
    cls=PassCommand,
    examples="""\
  passctl show
  passctl --json show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show the current draft."""
    app.emit(app.drafts.show())
