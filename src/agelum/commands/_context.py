"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns the workspace and centralizes result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from agelum.output.formatters import OutputSettings, format_result, format_warning

if TYPE_CHECKING:
    from collections.abc import Callable

    from agelum.config.settings import AgelumSettings
    from agelum.infrastructure.workspace import Workspace
    from agelum.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The workspace is created lazily so ``--help`` and ``--version`` never
    touch the filesystem.
    """

    def __init__(self, settings: AgelumSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from agelum.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def workspace(self) -> Workspace:
        """The workspace (created on first access)."""
        if self._workspace is None:
            from agelum.infrastructure.workspace import Workspace

            self._workspace = Workspace(self.settings)
        return self._workspace

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr so they don't
          pollute piped output (JSON mode already carries them).
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
            if not settings.json_output and not settings.quiet:
                for warning in result.warnings:
                    click.echo(format_warning(warning), err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def emit_call(self, op: str, call: Callable[[], ServiceResult]) -> None:
        """Run a service call and emit its result.

        Filesystem errors outside the document-store error kinds (for
        example permission denied) are reported as ``FILESYSTEM_ERROR``.
        """
        from agelum.services.result import ServiceResult

        try:
            result = call()
        except OSError as exc:
            result = ServiceResult.failure(op, "FILESYSTEM_ERROR", str(exc))
        self.emit(result)
