"""
Summary: Resolve paths to metadata and probe whether they are directories.
Why: Give formatter, walker and runner one place that touches stat and opendir.
"""

from __future__ import annotations

from typing import Final, final

from ..domain.errors import EntryAccessError
from ..domain.models import ResolvedEntry
from .errors import ErrorReporter
from .ports import FileSystemPort

ACCESS_ACTION: Final[str] = "cannot access"


@final
class PathClassifier:
    """Path existence, metadata and directory-ness checks."""

    def __init__(self, filesystem: FileSystemPort, reporter: ErrorReporter) -> None:
        self._filesystem = filesystem
        self._reporter = reporter

    def resolve(self, path: str, name: str | None = None) -> ResolvedEntry:
        """Look up metadata for ``path``.

        Args:
            path: Path to stat; symlinks are followed.
            name: Display name for the entry. Defaults to ``path``.

        Returns:
            ResolvedEntry: Fresh metadata for the path.

        Raises:
            EntryAccessError: If the lookup fails. Nothing is reported here.
        """
        try:
            info = self._filesystem.stat(path)
        except OSError as error:
            raise EntryAccessError.from_os_error(ACCESS_ACTION, path, error) from error
        return ResolvedEntry.from_stat(path, path if name is None else name, info)

    def exists(self, path: str) -> bool:
        """Return whether ``path`` can be looked up, reporting failures."""

        try:
            _ = self.resolve(path)
        except EntryAccessError as error:
            self._reporter.report(error)
            return False
        return True

    def is_directory(self, path: str) -> bool:
        """Return whether ``path`` can be opened as a directory stream.

        Call only after ``resolve`` succeeded for ``path``. The answer comes from
        actually opening the path, not from its mode bits.
        """
        try:
            stream = self._filesystem.open_directory(path)
        except OSError:
            return False
        stream.close()
        return True


__all__ = ["ACCESS_ACTION", "PathClassifier"]
