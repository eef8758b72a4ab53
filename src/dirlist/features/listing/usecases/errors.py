"""src/dirlist/features/listing/usecases/errors.py
What: Report listing failures and fold them into the run status.
Why: Every failure is handled where it is detected, never fatal to the run.
"""

from __future__ import annotations

import logging
from typing import final

from dirlist.config import DEFAULT_PROGRAM_NAME
from dirlist.platform.logging import logger

from ..domain.errors import EntryAccessError
from ..domain.models import ErrorKind, RunStatus
from .events import ListingEvent


@final
class ErrorReporter:
    """Shared error channel for classifier, formatter and walker."""

    status: RunStatus
    program_name: str

    def __init__(self, status: RunStatus, program_name: str = DEFAULT_PROGRAM_NAME) -> None:
        self.status = status
        self.program_name = program_name

    def report(self, error: EntryAccessError) -> None:
        """Print ``<prog>: <action> <path>: <reason>`` and record the failure."""

        logger.error(
            "%s: %s %s: %s",
            self.program_name,
            error.action,
            error.path,
            error.reason,
            extra={
                "listing_event": ListingEvent.ENTRY_ERROR.value,
                "entry_path": error.path,
                "error_kind": error.kind.value,
            },
        )
        self.status.record_error(error.kind)

    def record_lookup_failure(self, what: str, ident: int) -> None:
        """Record an unresolved owner or group id without printing a message."""

        logger.log(
            logging.DEBUG,
            "No %s name for id %d; showing the numeric id",
            what,
            ident,
            extra={"listing_event": ListingEvent.OWNER_FALLBACK.value},
        )
        self.status.record_error(ErrorKind.OTHER)


__all__ = ["ErrorReporter"]
