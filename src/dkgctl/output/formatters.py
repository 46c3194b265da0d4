"""Rich/JSON output helpers for the CLI.

``dkgctl call`` renders a ServiceResult for humans (key-value lines) or
machines (--json); ``dkgctl ops`` renders the operation table.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table

from dkgctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from dkgctl.dispatch.registry import OperationRegistry
    from dkgctl.services.result import ServiceResult


def _format_data_human(data: dict[str, Any]) -> str:
    """Format result data as indented key-value pairs."""
    lines: list[str] = []
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            lines.append(f"  {key}: {_json.dumps(value, separators=(',', ':'), ensure_ascii=False)}")
        else:
            lines.append(f"  {key}: {value}")
    return "\n".join(lines)


def format_result(result: ServiceResult, *, json_output: bool = False) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)
    if result.ok:
        parts = [f"OK: {result.op}"]
        if result.data:
            parts.append(_format_data_human(result.data))
        return "\n".join(parts)
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {error_msg}"


def render_operations(registry: OperationRegistry, *, json_output: bool = False) -> str:
    """List registered operations with the surfaces they are served on."""
    if json_output:
        rows = [
            {
                "name": op.name,
                "title": op.title,
                "tool": op.tool is not None,
                "route": f"{op.route.method} {op.route.path}" if op.route else None,
            }
            for op in registry
        ]
        return _json.dumps(rows, indent=2)

    console = create_console()
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Operation", style="dkg.op")
    table.add_column("Title")
    table.add_column("Tool", style="dkg.tool")
    table.add_column("Route", style="dkg.route")
    for op in registry:
        route = f"{op.route.method} {op.route.path}" if op.route else "-"
        table.add_row(op.name, op.title, "yes" if op.tool else "-", route)
    console.print(table)
    return get_output(console).rstrip("\n")
