"""src/dirlist/features/listing/usecases/events.py
What: Structured event identifiers attached to listing log records.
Why: Let the console handler style records without parsing message text.
"""

from __future__ import annotations

from enum import StrEnum


class ListingEvent(StrEnum):
    """Structured event identifiers for listing logs."""

    ENTRY_ERROR = "listing.entry.error"
    ENTRY_SKIPPED = "listing.entry.skipped"
    OWNER_FALLBACK = "listing.owner.fallback"


__all__ = ["ListingEvent"]
