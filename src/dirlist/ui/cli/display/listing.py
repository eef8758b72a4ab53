"""Console sink for listing output."""

from __future__ import annotations

from typing import final

from rich.console import Console


@final
class ConsoleListingOutput:
    """Writes listing lines to the stream of a Rich console, byte for byte."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the sink.

        Args:
            console: Console whose stream receives the lines. Defaults to stdout.
        """
        self.console = console or Console(
            soft_wrap=True,
            markup=False,
            emoji=False,
            highlight=False,
        )

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a newline.

        ``Console.print`` expands tabs and drops control characters, both of
        which can appear in file names, so the text bypasses rendering.
        """
        _ = self.console.file.write(f"{text}\n")


__all__ = ["ConsoleListingOutput"]
