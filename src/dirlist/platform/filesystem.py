"""Filesystem adapter backed by the ``os`` module."""

from __future__ import annotations

import grp
import os
import pwd
from collections.abc import Iterator
from types import TracebackType
from typing import final

from dirlist.features.listing.domain.models import (
    DirectoryEntry,
    EntryKind,
    FileStat,
    PSEUDO_DIRECTORIES,
)


def _entry_kind(entry: os.DirEntry[str]) -> EntryKind:
    """Classify a scandir entry by its own type, without following symlinks."""

    try:
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.REGULAR
    except OSError:
        return EntryKind.OTHER
    return EntryKind.OTHER


@final
class ScandirStream:
    """Directory stream over ``os.scandir`` that also yields ``.`` and ``..``."""

    def __init__(self, path: str) -> None:
        self._iterator = os.scandir(path)

    def __enter__(self) -> ScandirStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __iter__(self) -> Iterator[DirectoryEntry]:
        # scandir omits the pseudo-directories that readdir reports first.
        for name in sorted(PSEUDO_DIRECTORIES):
            yield DirectoryEntry(name, EntryKind.DIRECTORY)
        for entry in self._iterator:
            yield DirectoryEntry(entry.name, _entry_kind(entry))

    def close(self) -> None:
        self._iterator.close()


@final
class OsFileSystem:
    """Read-only filesystem access for the listing engine."""

    def stat(self, path: str) -> FileStat:
        result = os.stat(path)
        return FileStat(
            mode=result.st_mode,
            nlink=result.st_nlink,
            uid=result.st_uid,
            gid=result.st_gid,
            size=result.st_size,
            mtime=int(result.st_mtime),
        )

    def open_directory(self, path: str) -> ScandirStream:
        return ScandirStream(path)

    def user_name(self, uid: int) -> str | None:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return None

    def group_name(self, gid: int) -> str | None:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return None


__all__ = ["OsFileSystem", "ScandirStream"]
