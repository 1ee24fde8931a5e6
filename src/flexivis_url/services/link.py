"""LinkService — build, encode and explain Flexivis links.

Wraps the domain functions for file and CLI use: loads layout documents,
maps their failures onto :class:`ServiceError` codes, and reports
non-fatal problems (such as duplicate view names) as warnings.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from flexivis_url.domain.compiler import compile_layout
from flexivis_url.domain.document import LayoutDocument, load_document
from flexivis_url.domain.encoding import escape_parameter_value
from flexivis_url.domain.example import readme_example
from flexivis_url.domain.layout import (
    LayoutNode,
    SideBySide,
    Sized,
    VerticalStack,
    View,
    ViewName,
)
from flexivis_url.domain.urls import layout_url, resolve_layout
from flexivis_url.services.result import ServiceResult

if TYPE_CHECKING:
    from flexivis_url.config.settings import FlexivisSettings

logger = logging.getLogger(__name__)


def _view_payload(view: View) -> dict[str, str]:
    return {"name": view.name, "type": str(view.type), "resource": view.resource}


def _describe(node: LayoutNode) -> dict[str, Any]:
    """Nested description of a layout tree, for ``explain``."""
    match node:
        case View():
            return {"kind": "view", "name": node.name, "type": str(node.type)}
        case ViewName():
            return {"kind": "name", "name": node.name}
        case Sized():
            return {
                "kind": "sized",
                "percentage": node.percentage,
                "child": _describe(node.inner),
            }
        case SideBySide():
            return {"kind": "side_by_side", "children": [_describe(c) for c in node.children]}
        case VerticalStack():
            return {"kind": "vertical_stack", "children": [_describe(c) for c in node.children]}
    msg = f"Not a layout node: {node!r}"
    raise TypeError(msg)


def _duplicate_name_warnings(views: tuple[View, ...]) -> list[str]:
    counts = Counter(view.name for view in views)
    return [
        f"View name {name!r} is used {count} times; Flexivis will only see one of them"
        for name, count in counts.items()
        if count > 1
    ]


class LinkService:
    """Operations behind the ``build``, ``encode``, ``example`` and ``explain`` commands."""

    def __init__(self, settings: FlexivisSettings) -> None:
        self._host = settings.service.host

    def build(self, root: LayoutNode, *, layout_name: str | None = None) -> ServiceResult:
        """Build a URL for an in-memory layout tree.

        ``data["layout"]`` is the layout parameter actually written, ``""``
        when it was omitted.
        """
        compiled = compile_layout(root)
        layout = resolve_layout(compiled.layout, layout_name)
        url = layout_url(layout, compiled.views, host=self._host)
        logger.debug("Built URL for layout %r with %d views", layout, len(compiled.views))
        return ServiceResult.success(
            "build_url",
            {
                "url": url,
                "layout": layout,
                "views": [_view_payload(v) for v in compiled.views],
            },
            _duplicate_name_warnings(compiled.views),
        )

    def build_from_file(self, path: Path, *, layout_name: str | None = None) -> ServiceResult:
        """Build a URL from a TOML or JSON layout document.

        *layout_name* takes precedence over the document's ``layout_name``.
        """
        loaded = self._load_tree(path, "build_url")
        if isinstance(loaded, ServiceResult):
            return loaded
        document, root = loaded
        override = layout_name if layout_name is not None else document.layout_name
        return self.build(root, layout_name=override)

    def encode(self, value: str) -> ServiceResult:
        """Escape a single parameter value."""
        return ServiceResult.success(
            "encode_value", {"value": value, "encoded": escape_parameter_value(value)}
        )

    def example(self) -> ServiceResult:
        """Build the README example URL."""
        return self.build(readme_example()).model_copy(update={"op": "readme_example"})

    def explain_file(self, path: Path) -> ServiceResult:
        """Describe the layout tree of a document without building a URL."""
        op = "explain_layout"
        loaded = self._load_tree(path, op)
        if isinstance(loaded, ServiceResult):
            return loaded
        _, root = loaded
        compiled = compile_layout(root)
        return ServiceResult.success(
            op,
            {
                "layout": compiled.layout,
                "views": [_view_payload(v) for v in compiled.views],
                "tree": _describe(root),
            },
            _duplicate_name_warnings(compiled.views),
        )

    def _load_tree(
        self, path: Path, op: str
    ) -> tuple[LayoutDocument, LayoutNode] | ServiceResult:
        if not path.is_file():
            return ServiceResult.failure(
                op, "NOT_FOUND", f"No layout document at {path}", path=str(path)
            )
        try:
            document = load_document(path)
        except ValidationError as exc:
            errors = [
                {"loc": ".".join(str(p) for p in err["loc"]), "msg": err["msg"]}
                for err in exc.errors()
            ]
            return ServiceResult.failure(
                op,
                "INVALID_DOCUMENT",
                f"Invalid layout document {path.name}: {exc.error_count()} error(s)",
                path=str(path),
                errors=errors,
            )
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_DOCUMENT", str(exc), path=str(path))
        try:
            root = document.to_layout()
        except (ValueError, TypeError) as exc:
            return ServiceResult.failure(op, "INVALID_LAYOUT", str(exc), path=str(path))
        logger.debug("Loaded layout document %s", path)
        return document, root
