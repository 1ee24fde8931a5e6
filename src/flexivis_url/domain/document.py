"""Layout documents — declarative layout trees in TOML or JSON.

Document format::

    layout_name = "..."          # optional layout expression override

    [layout]
    side_by_side = [
      { vertical_stack = [
          { view = "explanation", type = "md", url = "https://...", percent = 30 },
          { view = "map", type = "map", url = "https://..." },
      ] },
      { view = "source", type = "json", inline = '{"a": 1}' },
    ]

Every node holds exactly one of ``view``, ``name``, ``side_by_side`` or
``vertical_stack``; ``percent`` wraps any node in :class:`Sized`.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, model_validator

from flexivis_url.domain.layout import (
    MAX_PERCENTAGE,
    LayoutNode,
    SideBySide,
    VerticalStack,
    ViewName,
)
from flexivis_url.domain.types import ViewType
from flexivis_url.domain.views import VIEW_CONSTRUCTORS, inline, url_resource

_NODE_KINDS = ("view", "name", "side_by_side", "vertical_stack")


class LayoutSpec(BaseModel):
    """One node of a layout document."""

    model_config = {"frozen": True, "extra": "forbid"}

    view: str | None = None
    type: ViewType = ViewType.RAW
    url: str | None = None
    inline: str | None = None
    name: str | None = None
    side_by_side: list[LayoutSpec] | None = None
    vertical_stack: list[LayoutSpec] | None = None
    percent: int | None = Field(default=None, ge=0, le=MAX_PERCENTAGE)

    @model_validator(mode="after")
    def _check_shape(self) -> LayoutSpec:
        kinds = [kind for kind in _NODE_KINDS if getattr(self, kind) is not None]
        if len(kinds) != 1:
            msg = (
                f"Layout node needs exactly one of {', '.join(_NODE_KINDS)}, "
                f"got {kinds or 'none'}"
            )
            raise ValueError(msg)
        if self.view is not None:
            if (self.url is None) == (self.inline is None):
                msg = f"View {self.view!r} needs exactly one of url, inline"
                raise ValueError(msg)
            if self.type is ViewType.RAW and self.inline is not None:
                msg = f"View {self.view!r} cannot show inline content as an IFrame"
                raise ValueError(msg)
        elif self.url is not None or self.inline is not None or "type" in self.model_fields_set:
            msg = "Only view nodes may set type, url or inline"
            raise ValueError(msg)
        return self

    def to_layout(self) -> LayoutNode:
        """Build the layout tree described by this node."""
        node: LayoutNode
        if self.view is not None:
            resource = url_resource(self.url) if self.url is not None else inline(self.inline or "")
            node = VIEW_CONSTRUCTORS[self.type](self.view, resource)
        elif self.name is not None:
            node = ViewName(self.name)
        elif self.side_by_side is not None:
            node = SideBySide(*(child.to_layout() for child in self.side_by_side))
        else:
            node = VerticalStack(*(child.to_layout() for child in self.vertical_stack or []))
        if self.percent is not None:
            return node.occupying_percentage(self.percent)
        return node


class LayoutDocument(BaseModel):
    """Root of a layout document."""

    model_config = {"frozen": True, "extra": "forbid"}

    layout: LayoutSpec
    layout_name: str | None = None

    def to_layout(self) -> LayoutNode:
        return self.layout.to_layout()


def parse_document(data: dict[str, Any]) -> LayoutDocument:
    """Validate a decoded document.

    Raises:
        pydantic.ValidationError: If the document is malformed.
    """
    return LayoutDocument.model_validate(data)


def load_document(path: Path) -> LayoutDocument:
    """Read and validate a ``.toml`` or ``.json`` layout document."""
    raw = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        data = tomllib.loads(raw)
    elif suffix == ".json":
        data = json.loads(raw)
    else:
        msg = f"Unsupported layout document format: {path.name} (expected .toml or .json)"
        raise ValueError(msg)
    return parse_document(data)
