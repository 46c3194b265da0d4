"""Service contract shared by every surface.

Handlers return data; the dispatcher wraps it in ServiceResult.
Services must never import from commands, output, mcp or rest.
"""
