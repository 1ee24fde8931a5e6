"""Layout compiler — reduce a layout tree to a layout expression.

Produces the compact textual layout (e.g. ``(a30-b)/c``) together with
the views embedded in the tree, in depth-first order. Parentheses are
added only where the Flexivis layout grammar needs them:

- a join (``/`` or ``-``) nested inside another join is parenthesized;
- a join or a sized node nested inside a sized node is parenthesized;
- atomic names and sized nodes never need parentheses inside a join.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from flexivis_url.domain.layout import (
    LayoutNode,
    SideBySide,
    Sized,
    VerticalStack,
    View,
    ViewName,
)


class _Structure(IntEnum):
    """Outer structure of a layout expression, ordered by binding strength."""

    ATOMIC = 0
    SCALED = 1
    JOINED = 2


@dataclass(frozen=True)
class CompiledLayout:
    """Layout expression plus the views it references, in URL order."""

    layout: str
    views: tuple[View, ...]


def compile_layout(node: LayoutNode) -> CompiledLayout:
    """Compile *node* into its layout expression and embedded views."""
    layout, _, views = _compile(node)
    return CompiledLayout(layout=layout, views=tuple(views))


def _compile(node: LayoutNode) -> tuple[str, _Structure, list[View]]:
    match node:
        case View(name=name):
            return name, _Structure.ATOMIC, [node]
        case ViewName(name=name):
            return name, _Structure.ATOMIC, []
        case Sized(inner=inner, percentage=percentage):
            layout, views = _at_most(_Structure.ATOMIC, inner)
            return f"{layout}{percentage}", _Structure.SCALED, views
        case SideBySide(children=children):
            return _join("/", children)
        case VerticalStack(children=children):
            return _join("-", children)
        case _:
            msg = f"Not a layout node: {node!r}"
            raise TypeError(msg)


def _at_most(limit: _Structure, node: LayoutNode) -> tuple[str, list[View]]:
    layout, structure, views = _compile(node)
    if structure <= limit:
        return layout, views
    return f"({layout})", views


def _join(
    separator: str, children: tuple[LayoutNode, ...]
) -> tuple[str, _Structure, list[View]]:
    if not children:
        msg = "Need at least 1 structured layout but got 0"
        raise ValueError(msg)
    if len(children) == 1:
        return _compile(children[0])
    parts: list[str] = []
    views: list[View] = []
    for child in children:
        layout, child_views = _at_most(_Structure.SCALED, child)
        parts.append(layout)
        views.extend(child_views)
    return separator.join(parts), _Structure.JOINED, views
