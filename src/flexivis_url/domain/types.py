"""View types understood by Flexivis.

See https://flexivis.infrastruktur.link/#view-types.
"""

from __future__ import annotations

from enum import StrEnum


class ViewType(StrEnum):
    """Renderer tag written ahead of a view's resource (``<type>:``).

    ``RAW`` is the empty tag: the resource is shown as regular content
    in an IFrame and no prefix is written.
    """

    RAW = ""
    JSON = "json"
    MAP = "map"
    MARKDOWN = "md"
    MERMAID = "mermaid"
    TEXT = "text"
    VEGA = "vega"
