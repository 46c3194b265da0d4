"""Tests for format_result and the operations table."""

import json

from dkgctl.dispatch.registry import OperationRegistry
from dkgctl.output.formatters import format_result, render_operations
from dkgctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="downstream_error", message=msg),
    )


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        data = json.loads(format_result(_ok("echo_message", echo="hi"), json_output=True))
        assert data["ok"] is True
        assert data["op"] == "echo_message"
        assert data["data"]["echo"] == "hi"

    def test_json_error(self) -> None:
        data = json.loads(format_result(_err(msg="boom"), json_output=True))
        assert data["ok"] is False
        assert data["error"]["code"] == "downstream_error"
        assert data["error"]["message"] == "boom"


class TestFormatResultHuman:
    def test_success_lines(self) -> None:
        output = format_result(_ok("generate_greeting", greeting="Hello", timestamp="T"))
        assert output.splitlines() == ["OK: generate_greeting", "  greeting: Hello", "  timestamp: T"]

    def test_nested_values_compact_json(self) -> None:
        output = format_result(_ok("query_graph", results=[{"s": "urn:a"}]))
        assert '  results: [{"s":"urn:a"}]' in output

    def test_success_without_data(self) -> None:
        assert format_result(_ok("ping")) == "OK: ping"

    def test_error(self) -> None:
        assert format_result(_err("publish_note", "no funds")) == "ERROR: publish_note - no funds"


class TestRenderOperations:
    def test_json_rows(self, registry: OperationRegistry) -> None:
        rows = json.loads(render_operations(registry, json_output=True))
        assert [row["name"] for row in rows] == registry.names()
        greeting = rows[0]
        assert greeting == {
            "name": "generate_greeting",
            "title": "Generate Greeting",
            "tool": True,
            "route": "GET /greeting/{name}",
        }

    def test_table(self, registry: OperationRegistry) -> None:
        output = render_operations(registry)
        assert "Operation" in output
        assert "Route" in output
        assert "GET /publishnote/get/{ual:path}" in output
        assert "health_check" in output
