"""src/dirlist/features/listing/usecases/formatter.py
What: Render one resolved entry as a short name or a long metadata line.
Why: Keep the ls output format separate from traversal order and counting.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import final

from ..domain.models import ResolvedEntry
from ..domain.permissions import permission_string
from ..domain.timestamps import format_mtime
from .classifier import PathClassifier
from .errors import ErrorReporter
from .ports import FileSystemPort


@final
class EntryFormatter:
    """Formats entries for the listing output."""

    def __init__(
        self,
        filesystem: FileSystemPort,
        classifier: PathClassifier,
        reporter: ErrorReporter,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._filesystem = filesystem
        self._classifier = classifier
        self._reporter = reporter
        self._clock = clock

    def format(self, entry: ResolvedEntry, long_format: bool) -> str:
        """Render ``entry`` as one output line (without the newline).

        Args:
            entry: Metadata of the entry to render.
            long_format: Whether to include permissions, owner, size and date.

        Returns:
            str: The rendered line, with ``/`` appended for real directories.
        """
        line = self._long_line(entry) if long_format else entry.name
        return line + self._directory_suffix(entry)

    def _long_line(self, entry: ResolvedEntry) -> str:
        fields = (
            permission_string(entry.mode),
            str(entry.nlink),
            self._owner(entry.uid),
            self._group(entry.gid),
            str(entry.size),
            format_mtime(entry.mtime, self._clock()),
            entry.name,
        )
        return " ".join(fields)

    def _owner(self, uid: int) -> str:
        name = self._filesystem.user_name(uid)
        if name is None:
            self._reporter.record_lookup_failure("user", uid)
            return str(uid)
        return name

    def _group(self, gid: int) -> str:
        name = self._filesystem.group_name(gid)
        if name is None:
            self._reporter.record_lookup_failure("group", gid)
            return str(gid)
        return name

    def _directory_suffix(self, entry: ResolvedEntry) -> str:
        if entry.is_pseudo:
            return ""
        return "/" if self._classifier.is_directory(entry.path) else ""


__all__ = ["EntryFormatter"]
