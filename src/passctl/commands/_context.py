"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from passctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from passctl.config.settings import PassSettings
    from passctl.services.draft import DraftService
    from passctl.services.preview import PreviewService
    from passctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.  Services are created
    on first use so ``--help`` and ``--version`` never touch the draft file.
    """

    def __init__(self, settings: PassSettings) -> None:
        self.settings = settings
        self._drafts: DraftService | None = None
        self._previews: PreviewService | None = None

        from passctl.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            draft_path=settings.resolved_draft_path(),
        )

    @property
    def drafts(self) -> DraftService:
        if self._drafts is None:
            from passctl.services.draft import DraftService

            self._drafts = DraftService(self.settings)
        return self._drafts

    @property
    def previews(self) -> PreviewService:
        if self._previews is None:
            from passctl.services.preview import PreviewService

            self._previews = PreviewService(self.settings)
        return self._previews

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
