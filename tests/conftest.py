"""Shared pytest fixtures for dirlist tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from dirlist.config import Config
from tests.fakes import FakeFileSystem, RecordingOutput


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    """Provide a fake filesystem holding ``.`` and an empty ``root`` directory."""

    filesystem = FakeFileSystem()
    filesystem.add_dir(".")
    filesystem.add_dir("root")
    return filesystem


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point configuration at an empty location and reset the cached instance."""

    config_file = tmp_path_factory.mktemp("config") / "config.toml"
    monkeypatch.setenv("DIRLIST_CONFIG", str(config_file))
    Config.reset()
    try:
        yield config_file
    finally:
        Config.reset()
