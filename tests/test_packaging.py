"""Tests for the declared package metadata."""

from __future__ import annotations

import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def _project() -> dict:
    return tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]


class TestOptionalDependencies:
    def test_mcp_extra_stays_on_fastmcp_1x(self) -> None:
        # mcp 2.x no longer ships mcp.server.fastmcp.
        (requirement,) = _project()["optional-dependencies"]["mcp"]
        assert requirement.replace(" ", "") == "mcp>=1.10,<2"

    def test_test_extra_includes_http_client(self) -> None:
        test_extra = _project()["optional-dependencies"]["test"]
        assert any(req.startswith("httpx") for req in test_extra)
