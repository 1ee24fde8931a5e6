"""Command: build a Flexivis URL from a layout document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from flexivis_url.commands._options import examples_option

if TYPE_CHECKING:
    from flexivis_url.commands._context import AppContext


@click.command()
@examples_option(
    """\
  flexivis-url build walk.toml
  flexivis-url -q build walk.json | xargs open
  flexivis-url build dashboard.toml --layout-name "a/b"
  flexivis-url --json build walk.toml"""
)
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "--layout-name",
    default=None,
    help="Layout expression to use instead of the compiled one ('url' omits it).",
)
@click.pass_obj
def build(app: AppContext, document: Path, layout_name: str | None) -> None:
    """Build a Flexivis URL from a TOML or JSON layout DOCUMENT."""
    app.emit(app.links.build_from_file(document, layout_name=layout_name))
