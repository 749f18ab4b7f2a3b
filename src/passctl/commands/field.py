"""Command group: add, edit and inspect fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassGroup, collect_changes
from passctl.commands._choices import ALIGNMENT_CHOICE, ALIGNMENTS, GROUP_CHOICE, group_value

if TYPE_CHECKING:
    from passctl.commands._context import AppContext

_FIELD_EXAMPLES = """\
  passctl field add secondary
  passctl field update secondary 0 --label "PRÄMIE" --value "Gratis Kaffee"
  passctl field remove auxiliary 1
  passctl field move auxiliary 0 secondary
  passctl field capacity"""


@click.group(cls=PassGroup, examples=_FIELD_EXAMPLES)
@click.pass_obj
def field(app: AppContext) -> None:
    """Add, edit, move and remove pass fields."""


@field.command(
    examples="""\
  passctl field add header
  passctl --json field add back"""
)
@click.argument("group", type=GROUP_CHOICE)
@click.pass_obj
def add(app: AppContext, group: str) -> None:
    """Append an empty field to GROUP if the style has room for it."""
    app.emit(app.drafts.add_field(group_value(group)))


@field.command(
    examples="""\
  passctl field update primary 0 --value "3 von 10"
  passctl field update header 0 --key level --label LEVEL
  passctl field update auxiliary 0 --align center"""
)
@click.argument("group", type=GROUP_CHOICE)
@click.argument("index", type=int)
@click.option("--key", default=None, help="New field key (unique within the group).")
@click.option("--label", default=None, help="New label.")
@click.option("--value", default=None, help="New value.")
@click.option("--align", type=ALIGNMENT_CHOICE, default=None, help="Text alignment.")
@click.pass_obj
def update(
    app: AppContext,
    group: str,
    index: int,
    key: str | None,
    label: str | None,
    value: str | None,
    align: str | None,
) -> None:
    """Edit the field at INDEX in GROUP."""
    patch = collect_changes(
        key=key,
        label=label,
        value=value,
        text_alignment=ALIGNMENTS[align.lower()] if align else None,
    )
    app.emit(app.drafts.update_field(group_value(group), index, patch))


@field.command(
    examples="""\
  passctl field remove secondary 1"""
)
@click.argument("group", type=GROUP_CHOICE)
@click.argument("index", type=int)
@click.pass_obj
def remove(app: AppContext, group: str, index: int) -> None:
    """Remove the field at INDEX in GROUP."""
    app.emit(app.drafts.remove_field(group_value(group), index))


@field.command(
    examples="""\
  passctl field move auxiliary 0 secondary"""
)
@click.argument("source", type=GROUP_CHOICE)
@click.argument("index", type=int)
@click.argument("target", type=GROUP_CHOICE)
@click.pass_obj
def move(app: AppContext, source: str, index: int, target: str) -> None:
    """Move the field at INDEX from SOURCE to the end of TARGET."""
    app.emit(app.drafts.move_field(group_value(source), index, group_value(target)))


@field.command(
    examples="""\
  passctl field capacity
  passctl --json field capacity"""
)
@click.pass_obj
def capacity(app: AppContext) -> None:
    """Show how many more fields each group accepts."""
    app.emit(app.drafts.capacity())
