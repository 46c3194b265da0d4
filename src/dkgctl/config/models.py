"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, dkgctl.toml only contains overrides.
A fresh node needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_EXPLORER_URL = "https://dkg-testnet.origintrail.io/explore?ual="


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    host: str = "127.0.0.1"
    port: int = 9200
    prefix: str = ""
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class McpConfig(BaseModel):
    """[mcp] section."""

    model_config = {"frozen": True}

    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000


class PublishConfig(BaseModel):
    """[publish] section.

    Retention policy for created Knowledge Assets: public assets are kept
    for ``public_epochs``, private ones for ``private_epochs``.
    """

    model_config = {"frozen": True}

    explorer_url: str = DEFAULT_EXPLORER_URL
    public_epochs: int = 2
    private_epochs: int = 1
    immutable: bool = False
    query_type: str = "SELECT"


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    example1: bool = True
    publishnote: bool = True
    local_dir: Path | None = None
