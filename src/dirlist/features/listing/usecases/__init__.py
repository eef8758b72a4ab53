"""
Summary: Package exports for listing use cases.
Why: Keep callers on a stable import path while modules stay small.
"""

from .classifier import ACCESS_ACTION, PathClassifier
from .errors import ErrorReporter
from .events import ListingEvent
from .formatter import EntryFormatter
from .ports import DirectoryStream, FileSystemPort, ListingOutputPort
from .runner import DEFAULT_ROOT, ListingRunner
from .walker import DirectoryWalker

__all__ = [
    "ACCESS_ACTION",
    "DEFAULT_ROOT",
    "DirectoryStream",
    "DirectoryWalker",
    "EntryFormatter",
    "ErrorReporter",
    "FileSystemPort",
    "ListingEvent",
    "ListingOutputPort",
    "ListingRunner",
    "PathClassifier",
]
