"""Dual-surface dispatcher: operations declared once, served as MCP tools and REST routes."""

from dkgctl.dispatch.operation import InvalidInput, NoInput, Operation, RouteSpec, ToolSpec
from dkgctl.dispatch.registry import OperationRegistry

__all__ = ["InvalidInput", "NoInput", "Operation", "OperationRegistry", "RouteSpec", "ToolSpec"]
