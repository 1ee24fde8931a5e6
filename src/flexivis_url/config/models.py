"""Sections of ``flexivis.toml``. Every key has a default; the file is optional."""

from __future__ import annotations

from pydantic import BaseModel, Field

from flexivis_url.domain.urls import DEFAULT_HOST


class ServiceConfig(BaseModel):
    """[service] — which Flexivis instance URLs point at."""

    model_config = {"frozen": True}

    host: str = DEFAULT_HOST


class OutputConfig(BaseModel):
    """[output] — terminal rendering."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
