"""src/dirlist/features/listing/domain/models.py
What: Value objects and accumulators shared by the listing engine.
Why: Keep classifier, formatter and walker free of ad-hoc tuples and globals.
"""

from __future__ import annotations

import errno
import stat
from dataclasses import dataclass, replace
from enum import IntFlag, StrEnum
from typing import Final, final


PSEUDO_DIRECTORIES: Final[frozenset[str]] = frozenset({".", ".."})


class EntryKind(StrEnum):
    """Coarse file type used to dispatch listing behaviour."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        """Derive the kind from a ``st_mode`` value."""

        if stat.S_ISREG(mode):
            return cls.REGULAR
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        return cls.OTHER


class ErrorKind(StrEnum):
    """Classification of a failed filesystem operation."""

    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    OTHER = "other"

    @classmethod
    def from_os_error(cls, error: OSError) -> ErrorKind:
        """Classify an ``OSError`` raised by a filesystem call.

        Only ``EACCES`` counts as access denied; ``EPERM`` is an other error.
        """
        if error.errno == errno.EACCES:
            return cls.ACCESS_DENIED
        if error.errno == errno.ENOENT:
            return cls.NOT_FOUND
        return cls.OTHER


class StatusFlag(IntFlag):
    """Exit status bits accumulated over one run."""

    NONE = 0
    NOT_FOUND = 1 << 3
    ACCESS_DENIED = 1 << 4
    OTHER_ERROR = 1 << 5
    ERROR = 1 << 6


_KIND_FLAGS: Final[dict[ErrorKind, StatusFlag]] = {
    ErrorKind.ACCESS_DENIED: StatusFlag.ACCESS_DENIED,
    ErrorKind.NOT_FOUND: StatusFlag.NOT_FOUND,
    ErrorKind.OTHER: StatusFlag.OTHER_ERROR,
}


@final
@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One name yielded while enumerating a directory."""

    name: str
    kind: EntryKind

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def is_pseudo(self) -> bool:
        return self.name in PSEUDO_DIRECTORIES


@final
@dataclass(frozen=True, slots=True)
class FileStat:
    """Raw metadata returned by a filesystem lookup."""

    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: int


@final
@dataclass(frozen=True, slots=True)
class ResolvedEntry:
    """Metadata for a single path as seen at lookup time."""

    path: str
    name: str
    kind: EntryKind
    mode: int
    nlink: int
    uid: int
    gid: int
    size: int
    mtime: int

    @classmethod
    def from_stat(cls, path: str, name: str, info: FileStat) -> ResolvedEntry:
        """Build an entry from the raw stat information of ``path``."""

        return cls(
            path=path,
            name=name,
            kind=EntryKind.from_mode(info.mode),
            mode=info.mode,
            nlink=info.nlink,
            uid=info.uid,
            gid=info.gid,
            size=info.size,
            mtime=info.mtime,
        )

    @property
    def is_pseudo(self) -> bool:
        return self.name in PSEUDO_DIRECTORIES


@final
@dataclass(frozen=True, slots=True)
class ListingConfig:
    """Resolved listing switches supplied by the command line layer."""

    show_hidden: bool = False
    long_format: bool = False
    recursive: bool = False
    count_only: bool = False

    def resolved(self) -> ListingConfig:
        """Return the effective configuration.

        Counting takes precedence over detailed printing, so ``long_format``
        is dropped whenever ``count_only`` is set.
        """
        if self.count_only and self.long_format:
            return replace(self, long_format=False)
        return self


@dataclass(slots=True)
class RunStatus:
    """Mutable bookkeeping for one listing run.

    ``flags`` only ever grows; every reported failure sets ``ERROR`` plus
    exactly one kind bit.
    """

    flags: StatusFlag = StatusFlag.NONE
    file_count: int = 0

    def record_error(self, kind: ErrorKind) -> None:
        """Merge the bits for a failure of the given kind."""

        self.flags |= StatusFlag.ERROR | _KIND_FLAGS[kind]

    def count_entry(self) -> None:
        """Increment the number of entries that would have been listed."""

        self.file_count += 1

    @property
    def failed(self) -> bool:
        return self.flags != StatusFlag.NONE

    @property
    def exit_code(self) -> int:
        return int(self.flags)


__all__ = [
    "PSEUDO_DIRECTORIES",
    "DirectoryEntry",
    "EntryKind",
    "ErrorKind",
    "FileStat",
    "ListingConfig",
    "ResolvedEntry",
    "RunStatus",
    "StatusFlag",
]
