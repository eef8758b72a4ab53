"""
Summary: Render modification times the way ``ls -l`` does.
Why: Keep the recent/old/future cut-over rule in one pure function.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final

# Average Gregorian year (365.2425 days); entries younger than this show a clock time.
RECENT_WINDOW_SECONDS: Final[int] = 31_556_952


def format_mtime(mtime: int, now: float) -> str:
    """Format ``mtime`` relative to ``now`` (both epoch seconds, local time).

    Args:
        mtime: Modification time in whole seconds.
        now: Current time in seconds.

    Returns:
        str: ``"Mon DD HH:MM"`` for recent entries, ``"Mon DD YYYY"`` for entries
        older than the window or dated in the future.
    """
    moment = datetime.fromtimestamp(mtime)
    current = int(now)
    if current < mtime or current - mtime >= RECENT_WINDOW_SECONDS:
        return f"{moment:%b} {moment.day:>2} {moment:%Y}"
    return f"{moment:%b} {moment.day:>2} {moment:%H:%M}"


__all__ = ["RECENT_WINDOW_SECONDS", "format_mtime"]
