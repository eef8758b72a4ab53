"""Tests for listing domain models and the run status accumulator."""

from __future__ import annotations

import errno
import stat

import pytest

from dirlist.features.listing import (
    DirectoryEntry,
    EntryAccessError,
    EntryKind,
    ErrorKind,
    ListingConfig,
    RunStatus,
    StatusFlag,
)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (PermissionError(errno.EACCES, "Permission denied"), ErrorKind.ACCESS_DENIED),
        (FileNotFoundError(errno.ENOENT, "No such file or directory"), ErrorKind.NOT_FOUND),
        (NotADirectoryError(errno.ENOTDIR, "Not a directory"), ErrorKind.OTHER),
        (OSError(errno.ELOOP, "Too many levels of symbolic links"), ErrorKind.OTHER),
        (PermissionError(errno.EPERM, "Operation not permitted"), ErrorKind.OTHER),
        (OSError(errno.EACCES, "Permission denied"), ErrorKind.ACCESS_DENIED),
    ],
)
def test_error_kind_classifies_os_errors(error: OSError, expected: ErrorKind) -> None:
    """OS errors map onto exactly one error kind."""

    assert ErrorKind.from_os_error(error) is expected


@pytest.mark.parametrize(
    ("kind", "bit"),
    [
        (ErrorKind.ACCESS_DENIED, StatusFlag.ACCESS_DENIED),
        (ErrorKind.NOT_FOUND, StatusFlag.NOT_FOUND),
        (ErrorKind.OTHER, StatusFlag.OTHER_ERROR),
    ],
)
def test_record_error_sets_generic_and_kind_bits(kind: ErrorKind, bit: StatusFlag) -> None:
    """Every failure sets the generic bit plus exactly one kind bit."""

    status = RunStatus()
    status.record_error(kind)

    assert status.flags == StatusFlag.ERROR | bit
    assert status.failed


def test_run_status_accumulates_monotonically() -> None:
    """Bits from independent failures combine and never clear."""

    status = RunStatus()
    status.record_error(ErrorKind.NOT_FOUND)
    status.record_error(ErrorKind.ACCESS_DENIED)
    status.record_error(ErrorKind.NOT_FOUND)

    assert status.exit_code == 64 | 16 | 8
    assert not status.flags & StatusFlag.OTHER_ERROR


def test_exit_code_fits_in_eight_bits() -> None:
    status = RunStatus()
    for kind in ErrorKind:
        status.record_error(kind)

    assert status.exit_code == 120
    assert status.exit_code < 256


def test_fresh_status_is_success() -> None:
    status = RunStatus()

    assert status.exit_code == 0
    assert status.file_count == 0
    assert not status.failed


def test_count_entry_increments() -> None:
    status = RunStatus()
    status.count_entry()
    status.count_entry()

    assert status.file_count == 2


def test_count_only_drops_long_format() -> None:
    """Counting takes precedence over long output."""

    config = ListingConfig(long_format=True, count_only=True).resolved()

    assert config.count_only
    assert not config.long_format


def test_resolved_keeps_config_without_count_only() -> None:
    config = ListingConfig(show_hidden=True, long_format=True, recursive=True)

    assert config.resolved() is config


@pytest.mark.parametrize(
    ("mode", "kind"),
    [
        (stat.S_IFREG | 0o644, EntryKind.REGULAR),
        (stat.S_IFDIR | 0o755, EntryKind.DIRECTORY),
        (stat.S_IFLNK | 0o777, EntryKind.OTHER),
        (stat.S_IFIFO | 0o600, EntryKind.OTHER),
    ],
)
def test_entry_kind_from_mode(mode: int, kind: EntryKind) -> None:
    assert EntryKind.from_mode(mode) is kind


def test_directory_entry_flags() -> None:
    assert DirectoryEntry(".hidden", EntryKind.REGULAR).is_hidden
    assert DirectoryEntry("..", EntryKind.DIRECTORY).is_pseudo
    assert not DirectoryEntry("...", EntryKind.DIRECTORY).is_pseudo
    assert not DirectoryEntry("visible", EntryKind.REGULAR).is_hidden


def test_entry_access_error_keeps_os_reason() -> None:
    error = EntryAccessError.from_os_error(
        "cannot access", "some/path", PermissionError(errno.EACCES, "Permission denied")
    )

    assert error.kind is ErrorKind.ACCESS_DENIED
    assert error.reason == "Permission denied"
    assert str(error) == "cannot access some/path: Permission denied"
