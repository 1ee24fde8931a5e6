"""Command: escape a single parameter value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flexivis_url.commands._options import examples_option

if TYPE_CHECKING:
    from flexivis_url.commands._context import AppContext


@click.command()
@examples_option(
    """\
  flexivis-url encode "a b&c"
  flexivis-url -q encode "inline:# Title"
  flexivis-url --json encode 100%"""
)
@click.argument("value")
@click.pass_obj
def encode(app: AppContext, value: str) -> None:
    """Escape VALUE the way view resources are escaped in Flexivis URLs."""
    app.emit(app.links.encode(value))
