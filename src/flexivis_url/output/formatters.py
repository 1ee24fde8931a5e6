"""Pick the output mode for a ServiceResult: JSON, quiet, or Rich."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from flexivis_url.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from flexivis_url.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode selected by the global CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int | None = None


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the default Rich rendering. JSON is
    ASCII-only so values holding lone surrogates still serialize.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return json.dumps(result.model_dump(mode="json"), indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, width=settings.width)
