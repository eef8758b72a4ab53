"""
Summary: Export listing domain value objects and pure renderers.
Why: Give use cases a single import path for the domain layer.
"""

from .errors import EntryAccessError, ListingError
from .models import (
    PSEUDO_DIRECTORIES,
    DirectoryEntry,
    EntryKind,
    ErrorKind,
    FileStat,
    ListingConfig,
    ResolvedEntry,
    RunStatus,
    StatusFlag,
)
from .permissions import file_type_char, permission_string
from .timestamps import RECENT_WINDOW_SECONDS, format_mtime

__all__ = [
    "PSEUDO_DIRECTORIES",
    "RECENT_WINDOW_SECONDS",
    "DirectoryEntry",
    "EntryAccessError",
    "EntryKind",
    "ErrorKind",
    "FileStat",
    "ListingConfig",
    "ListingError",
    "ResolvedEntry",
    "RunStatus",
    "StatusFlag",
    "file_type_char",
    "format_mtime",
    "permission_string",
]
