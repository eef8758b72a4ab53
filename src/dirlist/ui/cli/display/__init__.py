"""Display helpers for the CLI."""

from dirlist.ui.cli.display.listing import ConsoleListingOutput

__all__ = ["ConsoleListingOutput"]
