"""Command: print the README example URL."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flexivis_url.commands._options import examples_option

if TYPE_CHECKING:
    from flexivis_url.commands._context import AppContext


@click.command()
@examples_option(
    """\
  flexivis-url example
  flexivis-url -q example"""
)
@click.pass_obj
def example(app: AppContext) -> None:
    """Build the README example URL."""
    app.emit(app.links.example())
