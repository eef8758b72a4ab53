"""
Summary: Exceptions raised by listing lookups before they are reported.
Why: Let lookups stay silent while callers decide how and when to report.
"""

from __future__ import annotations

from .models import ErrorKind


class ListingError(Exception):
    """Base class for listing engine failures."""


class EntryAccessError(ListingError):
    """A filesystem operation on a single path failed."""

    action: str
    path: str
    kind: ErrorKind
    reason: str

    def __init__(self, action: str, path: str, kind: ErrorKind, reason: str) -> None:
        super().__init__(f"{action} {path}: {reason}")
        self.action = action
        self.path = path
        self.kind = kind
        self.reason = reason

    @classmethod
    def from_os_error(cls, action: str, path: str, error: OSError) -> EntryAccessError:
        """Wrap an ``OSError`` raised while operating on ``path``."""

        reason = error.strerror or str(error)
        return cls(action, path, ErrorKind.from_os_error(error), reason)


__all__ = ["EntryAccessError", "ListingError"]
