"""Command: show the structure of a layout document."""

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
  flexivis-url explain walk.toml
  flexivis-url --json explain walk.toml"""
)
@click.argument("document", type=click.Path(path_type=Path))
@click.pass_obj
def explain(app: AppContext, document: Path) -> None:
    """Show the layout expression, tree and views of DOCUMENT."""
    app.emit(app.links.explain_file(document))
