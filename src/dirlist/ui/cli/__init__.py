"""Command line interface package."""

from dirlist.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
