"""Command line interface for citeformats."""

from .main import cli, main

__all__ = ["cli", "main"]
