"""Click building blocks shared by every passctl command.

``--examples`` prints copy-pasteable invocations and exits before the
draft is touched, so ``--help`` can stay short. A group declared
without its own examples shows the examples of its subcommands.

:func:`collect_changes` turns the optional flags of an editing command
into the patch handed to a service, and stops with exit code 1 when
no flag was given.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

NO_CHANGES_MESSAGE = "No changes specified. Use --help for options."


def collect_changes(**options: object) -> dict[str, object]:
    """Patch of every option that was given (not ``None``); exit 1 if empty."""
    changes = {name: value for name, value in options.items() if value is not None}
    if not changes:
        click.echo(NO_CHANGES_MESSAGE, err=True)
        raise SystemExit(1)
    return changes


def _examples_option(resolve: Callable[[click.Context], str]) -> click.Option:
    """Eager ``--examples`` flag; *resolve* yields the text for a context."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(resolve(ctx))
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show_examples,
        help="Show usage examples.",
    )


class PassCommand(click.Command):
    """Command that accepts ``examples=`` and grows an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(lambda _ctx: examples))


class PassGroup(click.Group):
    """Group whose subcommands default to :class:`PassCommand`.

    ``--examples`` is always available on a group: explicit ``examples``
    win, otherwise the subcommands' examples are listed in
    registration order.
    """

    command_class = PassCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        self.params.append(_examples_option(lambda _ctx: self.collected_examples()))

    def collected_examples(self) -> str:
        if self.examples:
            return self.examples
        parts = [getattr(command, "examples", None) for command in self.commands.values()]
        return "\n".join(part for part in parts if part)
