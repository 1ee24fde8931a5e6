"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from flexivis_url.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="build_url", data={"url": "https://x"})
        assert result.ok is True
        assert result.data == {"url": "https://x"}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        result = ServiceResult(
            ok=False, op="build_url", error=ServiceError(code="NOT_FOUND", message="missing")
        )
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="encode_value", data={"encoded": "a+b"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["encoded"] == "a+b"

    def test_success_helper(self) -> None:
        result = ServiceResult.success("encode_value", {"encoded": "x"}, ["careful"])
        assert result.ok is True
        assert result.warnings == ["careful"]
        assert result.error is None

    def test_failure_helper_collects_detail(self) -> None:
        result = ServiceResult.failure("build_url", "NOT_FOUND", "missing", path="a.toml")
        assert result.ok is False
        assert result.data == {}
        assert result.error == ServiceError(
            code="NOT_FOUND", message="missing", detail={"path": "a.toml"}
        )

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
