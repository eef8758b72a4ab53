"""
Summary: Verify the recent/old/future date rules of long listings.
Why: The cut-over at one average year is easy to get off by one.
"""

from __future__ import annotations

from datetime import datetime

from dirlist.features.listing.domain import RECENT_WINDOW_SECONDS, format_mtime


def _epoch(*args: int) -> int:
    return int(datetime(*args).timestamp())


def test_recent_entries_show_clock_time() -> None:
    mtime = _epoch(2024, 3, 5, 14, 7)

    assert format_mtime(mtime, now=mtime + 3600) == "Mar  5 14:07"


def test_old_entries_show_year() -> None:
    mtime = _epoch(2020, 11, 23, 8, 0)

    assert format_mtime(mtime, now=_epoch(2024, 1, 1, 0, 0)) == "Nov 23 2020"


def test_future_entries_show_year() -> None:
    mtime = _epoch(2031, 7, 14, 9, 30)

    assert format_mtime(mtime, now=_epoch(2024, 1, 1, 0, 0)) == "Jul 14 2031"


def test_window_boundary_switches_to_year() -> None:
    mtime = _epoch(2022, 6, 1, 12, 0)

    assert format_mtime(mtime, now=mtime + RECENT_WINDOW_SECONDS - 1) == "Jun  1 12:00"
    assert format_mtime(mtime, now=mtime + RECENT_WINDOW_SECONDS) == "Jun  1 2022"


def test_same_second_counts_as_recent() -> None:
    mtime = _epoch(2024, 12, 25, 23, 59)

    assert format_mtime(mtime, now=float(mtime)) == "Dec 25 23:59"


def test_two_digit_days_are_not_padded() -> None:
    mtime = _epoch(2024, 10, 19, 7, 5)

    assert format_mtime(mtime, now=mtime + 10) == "Oct 19 07:05"
