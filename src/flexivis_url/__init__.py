"""flexivis-url — build Flexivis links from structured layouts.

See https://flexivis.infrastruktur.link/ for information about Flexivis.
"""

from flexivis_url.domain.layout import (
    LayoutNode,
    SideBySide,
    Sized,
    VerticalStack,
    View,
    ViewName,
)
from flexivis_url.domain.urls import build_url, layout_url
from flexivis_url.domain.views import (
    ViewType,
    iframe,
    inline,
    json_view,
    map_view,
    markdown,
    mermaid,
    text,
    url_resource,
    vega,
)

__version__ = "0.1.0"

__all__ = [
    "LayoutNode",
    "SideBySide",
    "Sized",
    "VerticalStack",
    "View",
    "ViewName",
    "ViewType",
    "__version__",
    "build_url",
    "iframe",
    "inline",
    "json_view",
    "layout_url",
    "map_view",
    "markdown",
    "mermaid",
    "text",
    "url_resource",
    "vega",
]
