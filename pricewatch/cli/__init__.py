"""CLI commands for pricewatch.

This package provides the command-line interface, including the
interactive price monitor and one-shot quote lookups.
"""

from pricewatch.cli.main import cli, main

__all__ = ["cli", "main"]
