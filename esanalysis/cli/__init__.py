"""Command-line interface for rendering analysis settings."""

from .main import cli, main

__all__ = ["cli", "main"]
