# Where: dirlist.features.listing
# What: Provide a concise import surface for the listing engine.
# Why: Let the CLI and tests depend on one module path.

"""Directory listing feature: domain types and traversal use cases."""

from .domain import (
    DirectoryEntry,
    EntryAccessError,
    EntryKind,
    ErrorKind,
    FileStat,
    ListingConfig,
    ListingError,
    ResolvedEntry,
    RunStatus,
    StatusFlag,
)
from .usecases import (
    DirectoryWalker,
    EntryFormatter,
    ErrorReporter,
    FileSystemPort,
    ListingOutputPort,
    ListingRunner,
    PathClassifier,
)

__all__ = [
    "DirectoryEntry",
    "DirectoryWalker",
    "EntryAccessError",
    "EntryFormatter",
    "EntryKind",
    "ErrorKind",
    "ErrorReporter",
    "FileStat",
    "FileSystemPort",
    "ListingConfig",
    "ListingError",
    "ListingOutputPort",
    "ListingRunner",
    "PathClassifier",
    "ResolvedEntry",
    "RunStatus",
    "StatusFlag",
]
