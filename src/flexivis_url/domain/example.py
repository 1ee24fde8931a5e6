"""The README example: a few views of a walk through Berlin."""

from __future__ import annotations

import json
from typing import Any

from flexivis_url.domain.layout import LayoutNode, SideBySide, VerticalStack
from flexivis_url.domain.urls import DEFAULT_HOST, build_url
from flexivis_url.domain.views import iframe, inline, map_view, markdown, mermaid

SOME_MARKDOWN = """
# Example

This markdown will be _included in the URL_ and **rendered into a view**!
"""

DIAGRAM = (
    "graph TD; classDef empty stroke:none,fill:none; "
    "S( ):::empty -->|structured URL spec in code| G[flexivis-url] "
    "-->|URL| B[Browser] -->|URL| F[Flexivis] -->|a nicely rendered view| B"
)

BERLIN_WALK: dict[str, Any] = {
    "type": "Feature",
    "geometry": {
        "type": "LineString",
        "coordinates": [
            [13.3907, 52.5074],
            [13.3902, 52.5076],
            [13.3891, 52.5076],
            [13.3871, 52.5077],
            [13.3855, 52.5073],
            [13.3841, 52.5095],
            [13.3838, 52.5109],
            [13.3827, 52.5136],
            [13.3813, 52.5156],
            [13.3796, 52.5165],
            [13.3785, 52.5163],
        ],
    },
    "properties": {
        "stroke": "green",
        "id": 42,
        "title": "Berlin Walk",
        "description": "Represents GPS data collected during a hypothetical walk through Berlin.",
        "source": "handcrafted",
    },
}


def readme_example() -> LayoutNode:
    """Markdown and a diagram above an IFrame, next to a GeoJSON map."""
    return SideBySide(
        VerticalStack(
            SideBySide(
                markdown("description", inline(SOME_MARKDOWN)),
                mermaid("diagram", inline(DIAGRAM)),
            ),
            iframe("flexivis", "https://flexivis.infrastruktur.link/"),
        ).occupying_percentage(40),
        map_view("a", inline(json.dumps(BERLIN_WALK, separators=(",", ":")))),
    )


def readme_example_url(*, host: str = DEFAULT_HOST) -> str:
    return build_url(readme_example(), host=host)
