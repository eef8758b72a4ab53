"""Where: platform/logging/handlers.py
What: Rich console handler that renders structured listing events.
Why: Keep error lines terse and ls-like while still highlighting paths.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable, Group
from rich.highlighter import NullHighlighter
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text
from rich.traceback import Traceback


class ListingRichHandler(RichHandler):
    """Rich handler that prints listing events as single plain lines."""

    _EVENT_STYLES: ClassVar[dict[str, str]] = {
        "listing.entry.error": "red",
        "listing.entry.skipped": "yellow",
        "listing.owner.fallback": "yellow",
    }
    _SEPARATOR_STYLE: ClassVar[Style] = Style(color="magenta")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with listing-friendly defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        # File names may contain square brackets.
        kwargs["markup"] = False
        kwargs["highlighter"] = NullHighlighter()
        super().__init__(*args, **kwargs)

    def _style_path(self, path: str, color: str) -> Text:
        """Render ``path`` with separators highlighted."""

        text = Text()
        for char in path:
            if char == "/":
                _ = text.append(char, style=self._SEPARATOR_STYLE)
            else:
                _ = text.append(char, style=Style(color=color))
        return text

    def _render_listing_message(self, record: logging.LogRecord, message: str) -> Text | None:
        """Render structured listing events with dedicated styling."""

        event = getattr(record, "listing_event", None)
        if not isinstance(event, str):
            return None

        color = self._EVENT_STYLES.get(event, "blue")
        path = getattr(record, "entry_path", None)
        if not isinstance(path, str) or not path or path not in message:
            return Text(message, style=Style(color=color))

        head, _, tail = message.partition(path)
        text = Text()
        _ = text.append(head, style=Style(color=color, bold=event == "listing.entry.error"))
        _ = text.append_text(self._style_path(path, color))
        _ = text.append(tail, style=Style(color=color))
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for listing events."""

        listing_text = self._render_listing_message(record, message)
        if listing_text is not None:
            return listing_text

        return super().render_message(record, message)

    @override
    def render(
        self,
        *,
        record: logging.LogRecord,
        traceback: Traceback | None,
        message_renderable: ConsoleRenderable,
    ) -> ConsoleRenderable:
        """Emit the message on its own instead of inside the column grid.

        With every column hidden the grid still folds long messages to the
        console width; a soft-wrapping console keeps the bare message on one line.
        """
        if traceback is None:
            return message_renderable
        return Group(message_renderable, traceback)


__all__ = ["ListingRichHandler"]
