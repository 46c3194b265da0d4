"""Built-in plugins, keyed by the ``[plugins]`` flag that enables them."""

from __future__ import annotations

from dkgctl.plugins.builtins.example import ExamplePlugin
from dkgctl.plugins.builtins.publishnote import PublishNotePlugin

BUILTIN_PLUGINS: dict[str, type] = {
    "example1": ExamplePlugin,
    "publishnote": PublishNotePlugin,
}

__all__ = ["BUILTIN_PLUGINS", "ExamplePlugin", "PublishNotePlugin"]
