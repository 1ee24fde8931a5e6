"""State handed to every subcommand through ``click.pass_obj``."""

from __future__ import annotations

import click

from flexivis_url.config.logging import configure_logging
from flexivis_url.config.settings import FlexivisSettings
from flexivis_url.output.formatters import OutputSettings, format_result
from flexivis_url.services.link import LinkService
from flexivis_url.services.result import ServiceResult


class AppContext:
    """Settings, the link service, and how results reach the terminal."""

    def __init__(self, settings: FlexivisSettings) -> None:
        self.settings = settings
        self.links = LinkService(settings)
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*: stdout on success, stderr plus exit code 1 on failure.

        Warnings go to stderr (or stay inside the JSON payload) so piped
        URLs are never mixed with them.
        """
        output = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            width=self.settings.output.width,
        )
        click.echo(format_result(result, settings=output), err=not result.ok)
        if not result.ok:
            click.get_current_context().exit(1)
        if not output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
