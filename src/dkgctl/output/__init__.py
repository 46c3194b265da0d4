"""Output helpers for the CLI: Rich console and result formatting."""
