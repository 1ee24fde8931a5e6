"""Shared pytest fixtures for flexivis-url tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from flexivis_url.config.settings import FlexivisSettings
from flexivis_url.services.link import LinkService

DOCS = "https://raw.githubusercontent.com/programmiersportgruppe/flexivis/master/docs/samples"


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides."""
    for var in ("FLEXIVIS_URL_CONFIG", "FLEXIVIS_URL_SERVICE__HOST", "FLEXIVIS_URL_QUIET"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> FlexivisSettings:
    return FlexivisSettings.from_cli(start=tmp_path)


@pytest.fixture
def link_service(settings: FlexivisSettings) -> LinkService:
    return LinkService(settings)


@pytest.fixture
def write_doc(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a layout document into the temp directory and return its path."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


INTRODUCTION_TOML = f"""\
[layout]
side_by_side = [
  {{ vertical_stack = [
      {{ view = "explanation", type = "md", url = "{DOCS}/berlin-walk.md", percent = 30 }},
      {{ view = "map", type = "map", url = "{DOCS}/berlin-walk.json" }},
  ] }},
  {{ view = "source", type = "json", url = "{DOCS}/berlin-walk.json" }},
]
"""


@pytest.fixture
def introduction_doc(write_doc: Callable[[str, str], Path]) -> Path:
    """The Flexivis introduction example as a TOML layout document."""
    return write_doc("intro.toml", INTRODUCTION_TOML)
