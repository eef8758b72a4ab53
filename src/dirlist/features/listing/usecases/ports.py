"""Summary: Ports defining listing use case dependencies.
Why: Decouple the traversal engine from the OS so tests can swap in fakes."""

from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType
from typing import Protocol, runtime_checkable

from ..domain.models import DirectoryEntry, FileStat


@runtime_checkable
class DirectoryStream(Protocol):
    """An open directory handle that yields entries and must be closed."""

    def __enter__(self) -> DirectoryStream:
        ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        ...

    def __iter__(self) -> Iterator[DirectoryEntry]:
        """Yield entries in the order the underlying reader produces them."""
        ...

    def close(self) -> None:
        """Release the handle."""
        ...


@runtime_checkable
class FileSystemPort(Protocol):
    """Port for read-only filesystem access."""

    def stat(self, path: str) -> FileStat:
        """Return metadata for ``path``, following symlinks.

        Raises:
            OSError: If the lookup fails.
        """
        ...

    def open_directory(self, path: str) -> DirectoryStream:
        """Open ``path`` as a directory stream.

        The open happens eagerly, so failures surface from this call rather
        than from the first iteration.

        Raises:
            OSError: If ``path`` cannot be opened as a directory.
        """
        ...

    def user_name(self, uid: int) -> str | None:
        """Resolve a user id to a name, or ``None`` when unknown."""
        ...

    def group_name(self, gid: int) -> str | None:
        """Resolve a group id to a name, or ``None`` when unknown."""
        ...


@runtime_checkable
class ListingOutputPort(Protocol):
    """Port receiving rendered listing lines."""

    def write_line(self, text: str) -> None:
        """Emit one line; an empty string produces a blank line."""
        ...


__all__ = ["DirectoryStream", "FileSystemPort", "ListingOutputPort"]
