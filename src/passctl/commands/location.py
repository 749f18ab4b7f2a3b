"""Command group: lock-screen relevance (locations, date, distance)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.commands._base import PassGroup, collect_changes

if TYPE_CHECKING:
    from passctl.commands._context import AppContext


@click.group(cls=PassGroup)
@click.pass_obj
def location(app: AppContext) -> None:
    """Control where and when the pass shows on the lock screen."""


@location.command(
    "add",
    examples="""\
  passctl location add 53.5511 9.9937 --text "Café Nord ist gleich um die Ecke"
  passctl location add -- -33.8688 151.2093""",
)
@click.argument("latitude", type=click.FloatRange(-90, 90))
@click.argument("longitude", type=click.FloatRange(-180, 180))
@click.option("--text", "relevant_text", default=None, help="Lock-screen message near this place.")
@click.pass_obj
def add_location(
    app: AppContext,
    latitude: float,
    longitude: float,
    relevant_text: str | None,
) -> None:
    """Add a relevant location (at most 10)."""
    app.emit(app.drafts.add_location(latitude, longitude, relevant_text))


@location.command(
    "remove",
    examples="""\
  passctl location remove 0""",
)
@click.argument("index", type=int)
@click.pass_obj
def remove_location(app: AppContext, index: int) -> None:
    """Remove the location at INDEX."""
    app.emit(app.drafts.remove_location(index))


@location.command(
    "set",
    examples="""\
  passctl location set --date 2026-12-24T18:00:00+01:00
  passctl location set --max-distance 150
  passctl location set --date "" --max-distance 0""",
)
@click.option("--date", "relevant_date", default=None, help="ISO 8601 date; empty clears it.")
@click.option(
    "--max-distance",
    type=click.IntRange(min=0),
    default=None,
    help="Radius in meters around each location; 0 clears it.",
)
@click.pass_obj
def set_relevance(app: AppContext, relevant_date: str | None, max_distance: int | None) -> None:
    """Set the relevant date and the location radius."""
    changes = collect_changes(relevant_date=relevant_date, max_distance=max_distance)
    app.emit(app.drafts.set_relevance(changes))
