"""Subcommand modules for passctl.

Provides register_commands() which uses deferred imports to keep
``passctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    5 groups (have subcommands) + 9 standalone commands.
    """
    # --- Groups ---
    from passctl.commands.field import field
    from passctl.commands.image import image
    from passctl.commands.location import location
    from passctl.commands.preview import preview
    from passctl.commands.stamps import stamps

    cli.add_command(field)
    cli.add_command(image)
    cli.add_command(stamps)
    cli.add_command(location)
    cli.add_command(preview)

    # --- Standalone commands ---
    from passctl.commands.draft import new, show, templates
    from passctl.commands.export import export, validate
    from passctl.commands.style import barcode, colors, content, style

    cli.add_command(templates)
    cli.add_command(new)
    cli.add_command(show)
    cli.add_command(colors)
    cli.add_command(content)
    cli.add_command(barcode)
    cli.add_command(style)
    cli.add_command(validate)
    cli.add_command(export)
