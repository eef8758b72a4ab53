"""src/dirlist/features/listing/usecases/walker.py
What: Depth-first directory traversal that lists, counts and recurses.
Why: Keep partial failures local so one unreadable entry never stops a listing.
"""

from __future__ import annotations

import logging
from typing import final

from dirlist.platform.logging import logger

from ..domain.errors import EntryAccessError
from ..domain.models import DirectoryEntry, EntryKind, ListingConfig, RunStatus
from .classifier import ACCESS_ACTION, PathClassifier
from .errors import ErrorReporter
from .events import ListingEvent
from .formatter import EntryFormatter
from .ports import FileSystemPort, ListingOutputPort


@final
class DirectoryWalker:
    """Lists one directory tree according to a ``ListingConfig``."""

    def __init__(
        self,
        config: ListingConfig,
        filesystem: FileSystemPort,
        classifier: PathClassifier,
        formatter: EntryFormatter,
        reporter: ErrorReporter,
        output: ListingOutputPort,
        status: RunStatus,
    ) -> None:
        self.config = config
        self._filesystem = filesystem
        self._classifier = classifier
        self._formatter = formatter
        self._reporter = reporter
        self._output = output
        self._status = status

    def list_entry(self, path: str, name: str) -> None:
        """Print or count a single entry.

        The entry is looked up again here; if it vanished or became unreadable
        since enumeration, the failure is reported and the entry skipped.
        """
        try:
            entry = self._classifier.resolve(path, name)
        except EntryAccessError as error:
            self._reporter.report(error)
            return

        if self.config.count_only:
            self._status.count_entry()
            return

        self._output.write_line(self._formatter.format(entry, self.config.long_format))

    def walk(self, dir_path: str) -> None:
        """List the contents of ``dir_path``, recursing when configured."""

        try:
            stream = self._filesystem.open_directory(dir_path)
        except OSError as error:
            self._reporter.report(EntryAccessError.from_os_error(ACCESS_ACTION, dir_path, error))
            return

        with stream:
            for dirent in stream:
                self._visit(dir_path, dirent)

    def _visit(self, dir_path: str, dirent: DirectoryEntry) -> None:
        if dirent.is_hidden and not self.config.show_hidden:
            return

        full_path = f"{dir_path}/{dirent.name}"

        if dirent.kind is EntryKind.DIRECTORY:
            self.list_entry(full_path, dirent.name)
            if self.config.recursive and not dirent.is_pseudo:
                self._descend(full_path)
        elif dirent.kind is EntryKind.REGULAR:
            self.list_entry(full_path, dirent.name)
        else:
            logger.log(
                logging.DEBUG,
                "Skipping %s entry %s",
                dirent.kind.value,
                full_path,
                extra={
                    "listing_event": ListingEvent.ENTRY_SKIPPED.value,
                    "entry_path": full_path,
                },
            )

    def _descend(self, full_path: str) -> None:
        if self.config.count_only:
            self.walk(full_path)
            return

        self._output.write_line("")
        self._output.write_line(f"{full_path}:")
        self.walk(full_path)
        self._output.write_line("")


__all__ = ["DirectoryWalker"]
