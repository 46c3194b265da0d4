"""Shared pytest fixtures and test helpers for dkgctl tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from dkgctl.config.settings import DkgSettings
from dkgctl.dispatch.registry import OperationRegistry
from dkgctl.host import build_registry

SAMPLE_UAL = "did:dkg:otp:2043/0x1234567890abcdef/123456/789012"

SAMPLE_DOCUMENT: dict[str, Any] = {
    "@context": "https://schema.org/",
    "@type": "Article",
    "@id": "urn:article:example",
    "name": "Example Article",
}

# Not JSON, including constants the json module accepts by default.
INVALID_JSON: list[str] = [
    "not json",
    "NaN",
    "Infinity",
    "-Infinity",
    '{"x": NaN}',
    "[1, 2,]",
    '{"a": 1,}',
    "{'a': 1}",
    "",
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> DkgSettings:
    """Default settings rooted in a temp directory, no config file."""
    monkeypatch.delenv("DKGCTL_CONFIG", raising=False)
    return DkgSettings.from_cli(root=tmp_path)


@pytest.fixture
def graph_client() -> MagicMock:
    """Sync knowledge-graph client double with canned responses."""
    client = MagicMock(name="graph_client")
    client.asset.create.return_value = {"UAL": SAMPLE_UAL}
    client.asset.get.return_value = {"public": SAMPLE_DOCUMENT, "private": None}
    client.graph.query.return_value = [{"s": "urn:article:example"}]
    return client


@pytest.fixture
def registry(settings: DkgSettings, graph_client: MagicMock) -> OperationRegistry:
    """Frozen registry with both built-in plugins and the client double."""
    return build_registry(settings, graph_client=graph_client, discover=False)


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp node root so the CLI never reads a real config.

    Use via ``@pytest.mark.usefixtures("_isolated_root")``.
    """
    monkeypatch.delenv("DKGCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------

FAKE_GRAPH_PLUGIN = f'''\
import pluggy

hookimpl = pluggy.HookimplMarker("dkgctl")


class _Asset:
    def create(self, content, options):
        return {{"UAL": "{SAMPLE_UAL}"}}

    def get(self, ual):
        return {{"public": {{"@id": "urn:article:example"}}}}


class _Graph:
    def query(self, query, query_type):
        return [{{"s": "urn:article:example"}}]


class _Client:
    asset = _Asset()
    graph = _Graph()


class FakeGraphPlugin:
    @hookimpl
    def provide_graph_client(self, settings):
        return _Client()
'''


def write_local_plugin(root: Path, name: str, source: str) -> Path:
    """Write a single-file plugin into ``<root>/.dkgctl/plugins/``."""
    plugin_dir = root / ".dkgctl" / "plugins"
    plugin_dir.mkdir(parents=True, exist_ok=True)
    path = plugin_dir / f"{name}.py"
    path.write_text(source, encoding="utf-8")
    return path
