"""Command group: platform previews."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassGroup

if TYPE_CHECKING:
    from passctl.commands._context import AppContext

_PREVIEW_EXAMPLES = """\
  passctl preview apple
  passctl preview apple --back
  passctl preview google
  passctl --json preview google"""


@click.group(cls=PassGroup, examples=_PREVIEW_EXAMPLES)
@click.pass_obj
def preview(app: AppContext) -> None:
    """Show how the draft lays out in each wallet."""


@preview.command(
    examples="""\
  passctl preview apple
  passctl preview apple --back"""
)
@click.option("--back", is_flag=True, help="Show the back of the pass.")
@click.pass_obj
def apple(app: AppContext, back: bool) -> None:
    """Apple Wallet layout of the draft."""
    app.emit(app.previews.apple(back=back))


@preview.command(
    examples="""\
  passctl preview google"""
)
@click.pass_obj
def google(app: AppContext) -> None:
    """Google Wallet layout of the draft."""
    app.emit(app.previews.google())
