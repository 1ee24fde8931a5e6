"""Assemble Flexivis URLs from layouts and views.

Output shape::

    https://<host>#[layout=<layout>&]<name>=[<type>:]<escaped resource>&...
"""

from __future__ import annotations

from collections.abc import Iterable

from flexivis_url.domain.compiler import compile_layout
from flexivis_url.domain.encoding import escape_parameter_value
from flexivis_url.domain.layout import LayoutNode, View

DEFAULT_HOST = "flexivis.infrastruktur.link"
# A single view called "url" fills the whole page and needs no layout parameter.
URL_SENTINEL = "url"


def resolve_layout(compiled: str, override: str | None = None) -> str:
    """The layout parameter for a compiled layout, or "" when it is omitted."""
    expression = compiled if override is None else override
    return "" if expression == URL_SENTINEL else expression


def layout_url(layout: str, views: Iterable[View], *, host: str = DEFAULT_HOST) -> str:
    """Build a URL from an explicit *layout* string and *views*.

    An empty *layout* omits the ``layout`` parameter. View names and types
    are written verbatim; only resources are escaped.
    """
    params: list[str] = []
    if layout:
        params.append(f"layout={layout}")
    for view in views:
        prefix = f"{view.type}:" if view.type else ""
        params.append(f"{view.name}={prefix}{escape_parameter_value(view.resource)}")
    return f"https://{host}#" + "&".join(params)


def build_url(
    root: LayoutNode, *, layout: str | None = None, host: str = DEFAULT_HOST
) -> str:
    """Build a Flexivis URL from a structured layout.

    Args:
        root: The layout tree.
        layout: Optional layout expression used instead of the compiled one.
        host: Flexivis host, for self-hosted instances.
    """
    compiled = compile_layout(root)
    return layout_url(resolve_layout(compiled.layout, layout), compiled.views, host=host)
