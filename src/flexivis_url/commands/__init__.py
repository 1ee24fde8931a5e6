"""Subcommands of ``flexivis-url``; one module per command."""
