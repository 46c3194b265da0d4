"""Tests for the ops and call commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dkgctl import __version__
from dkgctl.cli import cli
from tests.conftest import FAKE_GRAPH_PLUGIN, SAMPLE_UAL, write_local_plugin


@pytest.fixture
def _fake_graph(tmp_path: Path) -> None:
    """Local plugin providing a knowledge-graph client in the temp node root."""
    write_local_plugin(tmp_path, "fake_graph", FAKE_GRAPH_PLUGIN)


@pytest.mark.usefixtures("_isolated_root")
class TestRootGroup:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        for name in ("serve", "api", "ops", "call"):
            assert name in result.output


@pytest.mark.usefixtures("_isolated_root", "_fake_graph")
class TestOpsCommand:
    def test_table(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["ops"])
        assert result.exit_code == 0, result.output
        assert "generate_greeting" in result.output
        assert "POST /publishnote/create" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "ops"])
        assert result.exit_code == 0, result.output
        rows = {row["name"]: row for row in json.loads(result.output)}
        assert rows["health_check"] == {
            "name": "health_check",
            "title": "Health Check",
            "tool": False,
            "route": "GET /health",
        }
        assert rows["query_graph"]["tool"] is False
        assert rows["publish_note"]["tool"] is True


@pytest.mark.usefixtures("_isolated_root")
class TestCallCommand:
    def test_greeting(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["call", "generate_greeting", "-p", "name=Ada"])
        assert result.exit_code == 0, result.output
        assert "OK: generate_greeting" in result.output
        assert "greeting: Hello, Ada! Welcome to the DKG." in result.output

    @pytest.mark.usefixtures("_fake_graph")
    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "call", "echo_message", "-p", "message=abc"]
        )
        assert result.exit_code == 0, result.output
        parsed = json.loads(result.output)
        assert parsed["ok"] is True
        assert parsed["data"]["reversed"] == "cba"

    def test_invalid_input_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["call", "echo_message"])
        assert result.exit_code == 1
        assert "ERROR: echo_message - Message is required" in result.output

    def test_unknown_operation(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["call", "nope"])
        assert result.exit_code == 1
        assert "Unknown operation: nope" in result.output

    def test_bad_param(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["call", "echo_message", "-p", "message"])
        assert result.exit_code == 2
        assert "Expected key=value" in result.output

    @pytest.mark.usefixtures("_fake_graph")
    def test_publish_through_local_plugin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            ["--json", "call", "publish_note", "-p", 'content={"@id": "urn:x"}'],
        )
        assert result.exit_code == 0, result.output
        parsed = json.loads(result.output)
        assert parsed["data"]["ual"] == SAMPLE_UAL
        assert parsed["data"]["explorerLink"].endswith(SAMPLE_UAL)


@pytest.mark.usefixtures("_isolated_root")
class TestPluginSelection:
    def test_no_discover_skips_local_plugins(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        write_local_plugin(tmp_path, "fake_graph", FAKE_GRAPH_PLUGIN)
        result = cli_runner.invoke(cli, ["--no-discover", "ops"])
        assert result.exit_code == 0, result.output
        assert "echo_message" in result.output
        assert "publish_note" not in result.output

    def test_root_selects_node_directory(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        node = tmp_path / "node"
        write_local_plugin(node, "fake_graph", FAKE_GRAPH_PLUGIN)
        result = cli_runner.invoke(
            cli,
            ["--json", "--root", str(node), "call", "get_published_note", "-p", f"ual={SAMPLE_UAL}"],
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["data"]["ual"] == SAMPLE_UAL
