"""Tests for TOML/JSON layout documents."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from pydantic import ValidationError

from flexivis_url.domain.compiler import compile_layout
from flexivis_url.domain.document import LayoutDocument, load_document, parse_document
from flexivis_url.domain.layout import SideBySide, Sized, VerticalStack, View, ViewName
from flexivis_url.domain.types import ViewType


class TestParseDocument:
    def test_single_view(self) -> None:
        doc = parse_document({"layout": {"view": "a", "type": "json", "url": "https://x.org"}})
        assert doc.to_layout() == View("a", ViewType.JSON, "https://x.org")
        assert doc.layout_name is None

    def test_inline_view(self) -> None:
        doc = parse_document({"layout": {"view": "a", "type": "md", "inline": "# Hi"}})
        assert doc.to_layout() == View("a", ViewType.MARKDOWN, "inline:# Hi")

    def test_raw_view_defaults(self) -> None:
        doc = parse_document({"layout": {"view": "a", "url": "https://x.org"}})
        assert doc.to_layout() == View("a", ViewType.RAW, "https://x.org")

    def test_nested_joins_and_percent(self) -> None:
        doc = parse_document(
            {
                "layout": {
                    "side_by_side": [
                        {
                            "vertical_stack": [
                                {"view": "a", "type": "text", "url": "u", "percent": 30},
                                {"name": "b"},
                            ]
                        },
                        {"view": "c", "type": "vega", "url": "v"},
                    ]
                },
                "layout_name": "custom",
            }
        )
        root = doc.to_layout()
        assert isinstance(root, SideBySide)
        stack = root.children[0]
        assert isinstance(stack, VerticalStack)
        assert stack.children[0] == Sized(View("a", ViewType.TEXT, "u"), 30)
        assert stack.children[1] == ViewName("b")
        assert compile_layout(root).layout == "(a30-b)/c"
        assert doc.layout_name == "custom"

    def test_percent_on_join(self) -> None:
        doc = parse_document(
            {"layout": {"vertical_stack": [{"name": "a"}, {"name": "b"}], "percent": 40}}
        )
        assert compile_layout(doc.to_layout()).layout == "(a-b)40"

    @pytest.mark.parametrize(
        "layout",
        [
            {},
            {"view": "a", "name": "b", "url": "u"},
            {"view": "a"},
            {"view": "a", "url": "u", "inline": "i"},
            {"view": "a", "type": "", "inline": "i"},
            {"view": "a", "type": "pdf", "url": "u"},
            {"name": "a", "url": "u"},
            {"name": "a", "type": "json"},
            {"name": "a", "percent": 256},
            {"name": "a", "colour": "red"},
        ],
    )
    def test_invalid_nodes(self, layout: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            parse_document({"layout": layout})

    def test_layout_required(self) -> None:
        with pytest.raises(ValidationError):
            parse_document({"layout_name": "a"})

    def test_empty_join_fails_when_built(self) -> None:
        doc = parse_document({"layout": {"side_by_side": []}})
        with pytest.raises(ValueError, match="at least 1"):
            doc.to_layout()

    def test_iframe_scheme_checked_when_built(self) -> None:
        doc = parse_document({"layout": {"view": "a", "url": "ftp://x.org"}})
        with pytest.raises(ValueError, match="scheme"):
            doc.to_layout()


class TestLoadDocument:
    def test_toml(self, introduction_doc: Path) -> None:
        doc = load_document(introduction_doc)
        assert isinstance(doc, LayoutDocument)
        assert compile_layout(doc.to_layout()).layout == "(explanation30-map)/source"

    def test_json(self, write_doc: Callable[[str, str], Path]) -> None:
        path = write_doc(
            "doc.json",
            json.dumps({"layout": {"side_by_side": [{"name": "a"}, {"name": "b"}]}}),
        )
        assert compile_layout(load_document(path).to_layout()).layout == "a/b"

    def test_unsupported_suffix(self, write_doc: Callable[[str, str], Path]) -> None:
        path = write_doc("doc.yaml", "layout: {}")
        with pytest.raises(ValueError, match="Unsupported layout document format"):
            load_document(path)

    def test_invalid_toml(self, write_doc: Callable[[str, str], Path]) -> None:
        path = write_doc("doc.toml", "[layout\n")
        with pytest.raises(ValueError):
            load_document(path)
