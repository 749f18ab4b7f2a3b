"""Commands: validate the draft and export it for packaging."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassCommand

if TYPE_CHECKING:
    from passctl.commands._context import AppContext


@click.command(
    cls=PassCommand,
    examples="""\
  passctl validate
  passctl --json validate""",
)
@click.option("--strict", is_flag=True, help="Exit non-zero when the draft has errors.")
@click.pass_obj
def validate(app: AppContext, strict: bool) -> None:
    """Check the draft against the rules of its style."""
    result = app.drafts.validate()
    app.emit(result)
    if strict and result.ok and not result.data["valid"]:
        raise SystemExit(1)


@click.command(
    cls=PassCommand,
    examples="""\
  passctl export --output pass.json
  passctl -d coupon.json export -o dist/coupon-pass.json""",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("pass.json"),
    show_default=True,
    help="Where to write the exported draft.",
)
@click.pass_obj
def export(app: AppContext, output_path: Path) -> None:
    """Export the draft for packaging; refused while validation errors remain."""
    app.emit(app.drafts.export(output_path))
