"""Entry point of ``flexivis-url``."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from flexivis_url import __version__
from flexivis_url.commands._context import AppContext
from flexivis_url.commands.build import build
from flexivis_url.commands.encode import encode
from flexivis_url.commands.example import example
from flexivis_url.commands.explain import explain
from flexivis_url.config.settings import FlexivisSettings


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="flexivis-url")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print the bare URL or value only.")
@click.option("-v", "--verbose", is_flag=True, help="Show the compiled tree and debug logs.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read settings from this TOML file instead of flexivis.toml.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, **flags: Any) -> None:
    """Build Flexivis links from nested layouts of views."""
    settings = FlexivisSettings.from_cli(config_path=config_path, **flags)
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (build, encode, example, explain):
    cli.add_command(_command)
