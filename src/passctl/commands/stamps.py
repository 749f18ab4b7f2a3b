"""Command group: stamp-card progress."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassGroup

if TYPE_CHECKING:
    from passctl.commands._context import AppContext

_STAMPS_EXAMPLES = """\
  passctl stamps set --current 3
  passctl stamps set --current 4 --total 8 --apply
  passctl stamps set --icon "☕" --inactive-icon "·"
  passctl stamps apply"""


@click.group(cls=PassGroup, examples=_STAMPS_EXAMPLES)
@click.pass_obj
def stamps(app: AppContext) -> None:
    """Configure stamp progress on store cards and event tickets."""


@stamps.command(
    "set",
    examples="""\
  passctl stamps set --current 3
  passctl stamps set --total 12 --apply""",
)
@click.option("--current", type=int, default=None, help="Stamps collected (clamped to 0..total).")
@click.option("--total", type=int, default=None, help="Stamps needed for the reward (min 1).")
@click.option("--icon", default=None, help="Glyph for a collected stamp.")
@click.option("--inactive-icon", default=None, help="Glyph for a missing stamp.")
@click.option("--apply", "apply_", is_flag=True, help="Also rewrite the stamp fields.")
@click.pass_obj
def set_stamps(
    app: AppContext,
    current: int | None,
    total: int | None,
    icon: str | None,
    inactive_icon: str | None,
    apply_: bool,
) -> None:
    """Update the stamp configuration."""
    app.emit(
        app.drafts.set_stamps(
            current=current,
            total=total,
            icon=icon,
            inactive_icon=inactive_icon,
            apply=apply_,
        )
    )


@stamps.command(
    "apply",
    examples="""\
  passctl stamps apply
  passctl --json stamps apply""",
)
@click.pass_obj
def apply_stamps(app: AppContext) -> None:
    """Write the stamp count and progress glyphs into the pass fields."""
    app.emit(app.drafts.apply_stamps())
