"""Permission string rendering for long-format listings."""

from __future__ import annotations

import stat
from typing import Final

_TYPE_CHARS: Final[dict[int, str]] = {
    stat.S_IFREG: "-",
    stat.S_IFDIR: "d",
}

# Fixed rwxrwxrwx order: owner, group, other.
_PERMISSION_BITS: Final[tuple[tuple[int, str], ...]] = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def file_type_char(mode: int) -> str:
    """Return ``-`` for regular files, ``d`` for directories, ``?`` otherwise."""

    return _TYPE_CHARS.get(stat.S_IFMT(mode), "?")


def permission_string(mode: int) -> str:
    """Render ``mode`` as a 10-character string such as ``drwxr-xr-x``.

    Setuid, setgid and sticky bits are not represented.
    """
    chars = [file_type_char(mode)]
    chars.extend(char if mode & mask else "-" for mask, char in _PERMISSION_BITS)
    return "".join(chars)


__all__ = ["file_type_char", "permission_string"]
