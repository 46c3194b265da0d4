"""Locate the node's ``dkgctl.toml`` and the node root it defines.

Lookup order: ``DKGCTL_CONFIG`` (an explicit file, taken as-is), then the
start directory and each of its ancestors. The directory holding the file
is the node root; ``.dkgctl/plugins/`` is resolved against it.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "dkgctl.toml"
CONFIG_ENV_VAR = "DKGCTL_CONFIG"


def _lineage(start: Path) -> Iterator[Path]:
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``DKGCTL_CONFIG`` that points at a missing file yields None; it never
    falls back to the directory walk.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _lineage(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_node_root(config_path: Path | None, root: Path | None = None) -> Path:
    """Explicit *root*, else the directory of *config_path*, else cwd."""
    if root is not None:
        return root
    if config_path is not None:
        return config_path.parent
    return Path.cwd()
