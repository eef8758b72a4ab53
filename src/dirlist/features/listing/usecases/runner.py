"""src/dirlist/features/listing/usecases/runner.py
What: Drive a full listing over the command line roots.
Why: Wire the engine once per run around a single status accumulator.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import final

from dirlist.config import DEFAULT_PROGRAM_NAME

from ..domain.models import ListingConfig, RunStatus
from .classifier import PathClassifier
from .errors import ErrorReporter
from .formatter import EntryFormatter
from .ports import FileSystemPort, ListingOutputPort
from .walker import DirectoryWalker

DEFAULT_ROOT = "."


@final
class ListingRunner:
    """Lists every root argument and aggregates the run status."""

    config: ListingConfig
    status: RunStatus
    classifier: PathClassifier
    walker: DirectoryWalker

    def __init__(
        self,
        config: ListingConfig,
        filesystem: FileSystemPort,
        output: ListingOutputPort,
        *,
        status: RunStatus | None = None,
        clock: Callable[[], float] = time.time,
        program_name: str = DEFAULT_PROGRAM_NAME,
    ) -> None:
        """Build the engine for one run.

        Args:
            config: Listing switches; ``count_only`` overrides ``long_format``.
            filesystem: Filesystem adapter used for every lookup.
            output: Sink receiving listing lines.
            status: Accumulator to update. A fresh one is created when omitted.
            clock: Source of "now" for long-format dates.
            program_name: Prefix for error messages.
        """
        self.config = config.resolved()
        self.status = status if status is not None else RunStatus()
        self._output = output

        reporter = ErrorReporter(self.status, program_name)
        self.classifier = PathClassifier(filesystem, reporter)
        formatter = EntryFormatter(filesystem, self.classifier, reporter, clock)
        self.walker = DirectoryWalker(
            self.config,
            filesystem,
            self.classifier,
            formatter,
            reporter,
            output,
            self.status,
        )

    def run(self, paths: Sequence[str] = ()) -> RunStatus:
        """List ``paths`` (or the current directory) and return the status."""

        if not paths:
            self.walker.walk(DEFAULT_ROOT)
        else:
            show_headers = len(paths) > 1 or self.config.recursive
            for root in paths:
                self._list_root(root, show_headers)

        if self.config.count_only:
            self._output.write_line(str(self.status.file_count))

        return self.status

    def _list_root(self, root: str, show_headers: bool) -> None:
        if not self.classifier.exists(root):
            return

        if self.classifier.is_directory(root):
            if show_headers and not self.config.count_only:
                self._output.write_line(f"{root}:")
            self.walker.walk(root)
            return

        self.walker.list_entry(root, root)


__all__ = ["DEFAULT_ROOT", "ListingRunner"]
