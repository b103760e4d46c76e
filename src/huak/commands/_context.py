"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides the base operation configuration, lazy
operations initialization, and centralized result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from huak.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from huak.config.settings import HuakSettings
    from huak.domain.options import OperationConfig
    from huak.services.operations import Operations
    from huak.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. Operations are lazily
    initialized on first use so ``--help`` never imports the tooling layer.
    """

    def __init__(self, settings: HuakSettings) -> None:
        self.settings = settings
        self._operations: Operations | None = None

        from huak.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def enable_quiet(self) -> None:
        """Apply a ``-q`` given after the subcommand name."""
        self.settings = self.settings.model_copy(update={"quiet": True})

    @property
    def operations(self) -> Operations:
        """The operations backend (created lazily on first access)."""
        if self._operations is None:
            from huak.services import operations

            self._operations = operations.ToolOperations()
        return self._operations

    def base_config(self) -> OperationConfig:
        """A fresh OperationConfig with workspace root and verbosity set."""
        from huak.services.compose import base_config

        return base_config(self.settings)

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
            if output:
                click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
