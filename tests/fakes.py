"""In-memory fakes implementing the listing ports."""

from __future__ import annotations

import errno
import stat
from collections.abc import Iterator
from dataclasses import dataclass, field
from types import TracebackType

from dirlist.features.listing import DirectoryEntry, EntryKind, FileStat

FIXED_NOW: float = 1_700_000_000.0


@dataclass
class RecordingOutput:
    """Listing output sink that keeps every line in memory."""

    lines: list[str] = field(default_factory=list)

    def write_line(self, text: str) -> None:
        self.lines.append(text)


class FakeDirectoryStream:
    """Directory stream over a fixed list of entries."""

    def __init__(self, filesystem: FakeFileSystem, path: str, entries: list[DirectoryEntry]) -> None:
        self._filesystem = filesystem
        self._entries = entries
        self.path = path
        self.closed = False
        filesystem.open_streams.append(self)

    def __enter__(self) -> FakeDirectoryStream:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    def __iter__(self) -> Iterator[DirectoryEntry]:
        return iter(list(self._entries))

    def close(self) -> None:
        self.closed = True


@dataclass
class FakeFileSystem:
    """In-memory filesystem implementing ``FileSystemPort``.

    Directory listings keep insertion order and always start with ``.`` and
    ``..``. Failures are injected per path through ``stat_errors`` and
    ``open_errors``.
    """

    stats: dict[str, FileStat] = field(default_factory=dict)
    listings: dict[str, list[DirectoryEntry]] = field(default_factory=dict)
    stat_errors: dict[str, OSError] = field(default_factory=dict)
    open_errors: dict[str, OSError] = field(default_factory=dict)
    users: dict[int, str] = field(default_factory=lambda: {1000: "alice"})
    groups: dict[int, str] = field(default_factory=lambda: {1000: "staff"})
    open_streams: list[FakeDirectoryStream] = field(default_factory=list)

    def add_dir(self, path: str, mode: int = 0o755, mtime: int = int(FIXED_NOW) - 60) -> None:
        self.stats[path] = FileStat(
            mode=stat.S_IFDIR | mode, nlink=2, uid=1000, gid=1000, size=4096, mtime=mtime
        )
        self.listings[path] = [
            DirectoryEntry(".", EntryKind.DIRECTORY),
            DirectoryEntry("..", EntryKind.DIRECTORY),
        ]
        self._link(path, EntryKind.DIRECTORY)

    def add_file(
        self,
        path: str,
        size: int = 0,
        mode: int = 0o644,
        mtime: int = int(FIXED_NOW) - 60,
        uid: int = 1000,
        gid: int = 1000,
    ) -> None:
        self.stats[path] = FileStat(
            mode=stat.S_IFREG | mode, nlink=1, uid=uid, gid=gid, size=size, mtime=mtime
        )
        self._link(path, EntryKind.REGULAR)

    def add_entry(self, path: str, kind: EntryKind) -> None:
        """Add a bare directory entry without metadata."""

        self._link(path, kind)

    def _link(self, path: str, kind: EntryKind) -> None:
        parent, _, name = path.rpartition("/")
        if parent in self.listings:
            self.listings[parent].append(DirectoryEntry(name, kind))

    def stat(self, path: str) -> FileStat:
        if path in self.stat_errors:
            raise self.stat_errors[path]
        normalized = _normalize(path)
        if normalized not in self.stats:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return self.stats[normalized]

    def open_directory(self, path: str) -> FakeDirectoryStream:
        if path in self.open_errors:
            raise self.open_errors[path]
        normalized = _normalize(path)
        if normalized not in self.listings:
            if normalized in self.stats:
                raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return FakeDirectoryStream(self, path, self.listings[normalized])

    def user_name(self, uid: int) -> str | None:
        return self.users.get(uid)

    def group_name(self, gid: int) -> str | None:
        return self.groups.get(gid)


def _normalize(path: str) -> str:
    """Collapse ``dir/.`` and ``dir/..`` the way the kernel would for the fake tree."""

    parts: list[str] = []
    for part in path.split("/"):
        if part == ".":
            continue
        if part == "..":
            if parts:
                _ = parts.pop()
            continue
        parts.append(part)
    return "/".join(parts) or "."


def permission_denied(path: str) -> PermissionError:
    return PermissionError(errno.EACCES, "Permission denied", path)


def not_found(path: str) -> FileNotFoundError:
    return FileNotFoundError(errno.ENOENT, "No such file or directory", path)


