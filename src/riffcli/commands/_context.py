"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Configures logging and centralizes result emission
(stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from riffcli.config.logging import configure_logging
from riffcli.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from riffcli.config.settings import RiffSettings
    from riffcli.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``.
    """

    def __init__(self, settings: RiffSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def output_format(self, *, yaml_output: bool = False) -> str:
        """Resolve the output format: ``--json`` / ``--yaml`` beat the config file."""
        if self.settings.json_output:
            return "json"
        if yaml_output:
            return "yaml"
        return self.settings.output.format

    def emit(self, result: ServiceResult, *, yaml_output: bool = False) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            format=self.output_format(yaml_output=yaml_output),
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # Machine formats already carry warnings in the payload.
            if settings.format == "human":
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
