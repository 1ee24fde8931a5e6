"""Rich renderers for ServiceResult, one per operation.

Renderers print to a Console whose output :func:`render_result` captures.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme
from rich.tree import Tree

if TYPE_CHECKING:
    from flexivis_url.services.result import ServiceResult

THEME = Theme(
    {
        "flx.ok": "bold green",
        "flx.error": "bold red",
        "flx.warning": "bold yellow",
        "flx.op": "bold cyan",
        "flx.key": "dim",
        "flx.url": "underline blue",
        "flx.layout": "bold magenta",
        "flx.name": "bold",
        "flx.type": "green",
        "flx.percent": "yellow",
    }
)


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult, *, verbose: bool = False, width: int | None = None
) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = Console(theme=THEME, highlight=False, soft_wrap=True, width=width or 120)
    with console.capture() as capture:
        if result.ok:
            _OP_RENDERERS.get(result.op, _render_generic)(result, console, verbose=verbose)
        else:
            _render_error(result, console, verbose=verbose)
    return capture.get().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: just the URL or value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    for key in ("url", "encoded", "layout"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="flx.ok")
    op = Text(f"  {result.op}", style="flx.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, style: str = "") -> None:
    """Print a single indented key-value field."""
    console.print(Text.assemble((f"  {key}: ", "flx.key"), (str(value), style)))


def _views_table(views: list[dict[str, str]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("Name", style="flx.name")
    table.add_column("Type", style="flx.type")
    table.add_column("Resource", overflow="fold")
    for view in views:
        table.add_row(Text(view["name"]), Text(view["type"] or "(raw)"), Text(view["resource"]))
    return table


def _tree_label(node: dict[str, Any]) -> Text:
    kind = node["kind"]
    if kind == "view":
        label = Text(node["name"], style="flx.name")
        label.append(f"  {node['type'] or '(raw)'}", style="flx.type")
        return label
    if kind == "name":
        return Text(f"{node['name']}  (reference)", style="flx.name")
    if kind == "sized":
        return Text(f"{node['percentage']}%", style="flx.percent")
    return Text(kind.replace("_", " "), style="flx.layout")


def _add_tree(parent: Tree, node: dict[str, Any]) -> None:
    branch = parent.add(_tree_label(node))
    if "child" in node:
        _add_tree(branch, node["child"])
    for child in node.get("children", []):
        _add_tree(branch, child)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_url(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "layout", data.get("layout") or "(none)", "flx.layout")
    if verbose and data.get("views"):
        console.print()
        console.print(_views_table(data["views"]))
        console.print()
    _field(console, "url", data["url"], "flx.url")


def _render_encoded(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    if verbose:
        _field(console, "value", result.data["value"])
    _field(console, "encoded", result.data["encoded"])


def _render_explain(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    data = result.data
    _status_line(console, result)
    _field(console, "layout", data["layout"], "flx.layout")
    console.print()
    tree = Tree(Text("layout", style="flx.key"))
    _add_tree(tree, data["tree"])
    console.print(tree)
    if data.get("views"):
        console.print()
        console.print(_views_table(data["views"]))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    label = Text("ERROR", style="flx.error")
    op = Text(f"  {result.op}", style="flx.op")
    msg = result.error.message if result.error else "Unknown error"
    console.print(label, op, Text(f" — {msg}"), end="")
    console.print()
    if verbose and result.error and result.error.detail:
        console.print(Text("  detail:", style="flx.key"))
        for key, value in result.error.detail.items():
            if isinstance(value, (dict, list)):
                value = json.dumps(value, separators=(",", ":"))
            console.print(Text(f"    {key}: {value}"))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "build_url": _render_url,
    "readme_example": _render_url,
    "encode_value": _render_encoded,
    "explain_layout": _render_explain,
}
