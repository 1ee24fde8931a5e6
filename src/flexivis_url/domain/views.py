"""Resources and view constructors for each Flexivis view type."""

from __future__ import annotations

from flexivis_url.domain.layout import View
from flexivis_url.domain.types import ViewType

INLINE_PREFIX = "inline:"
IFRAME_SCHEMES: tuple[str, ...] = ("https:", "http:", "file:")


def url_resource(url: str) -> str:
    """A resource fetched by Flexivis from *url*."""
    return url


def inline(contents: str) -> str:
    """A resource whose *contents* are embedded in the URL itself.

    No escaping happens here; the whole resource is escaped once when
    the URL is assembled.
    """
    return INLINE_PREFIX + contents


def iframe(name: str, url: str) -> View:
    """Display regular content in an IFrame.

    See https://flexivis.infrastruktur.link/#regular-content.

    Raises:
        ValueError: If *url* does not use the https, http or file scheme.
    """
    if not url.startswith(IFRAME_SCHEMES):
        msg = f"IFrame content must have a URL with an https, http or file scheme, but got: {url}"
        raise ValueError(msg)
    return View(name, ViewType.RAW, url)


def json_view(name: str, json: str) -> View:
    """Interactive formatted JSON viewer with collapsible nodes."""
    return View(name, ViewType.JSON, json)


def map_view(name: str, geojson: str) -> View:
    """Interactive map of GeoJSON data."""
    return View(name, ViewType.MAP, geojson)


def markdown(name: str, source: str) -> View:
    """Rendered markdown."""
    return View(name, ViewType.MARKDOWN, source)


def mermaid(name: str, source: str) -> View:
    """Rendered Mermaid diagram (https://mermaid-js.github.io/)."""
    return View(name, ViewType.MERMAID, source)


def text(name: str, source: str) -> View:
    return View(name, ViewType.TEXT, source)


def vega(name: str, spec: str) -> View:
    """Rendered Vega or Vega-Lite chart."""
    return View(name, ViewType.VEGA, spec)


VIEW_CONSTRUCTORS = {
    ViewType.RAW: iframe,
    ViewType.JSON: json_view,
    ViewType.MAP: map_view,
    ViewType.MARKDOWN: markdown,
    ViewType.MERMAID: mermaid,
    ViewType.TEXT: text,
    ViewType.VEGA: vega,
}
