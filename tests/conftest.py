"""Shared fixtures for app-data tests."""

from __future__ import annotations

from pathlib import Path

import pytest

import app_data
from app_data.config import StoreSettings
from app_data.store import KeyedJSONStore
from tests.fakes.fake_filesystem import RecordingFileSystem


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host APP_DATA_* / APPDATA variables out of every test."""
    for name in (
        "APPDATA",
        "APP_DATA_APP_NAME",
        "APP_DATA_ROOT_DIR",
        "APP_DATA_IN_MEMORY_CACHE",
        "APP_DATA_LEGACY_DARWIN_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    app_data.reset_default_store()


@pytest.fixture
def settings(tmp_path: Path) -> StoreSettings:
    """Settings rooted in a per-test temp dir, app name preset."""
    return StoreSettings(app_name="demoapp", root_dir=tmp_path)


@pytest.fixture
def store(settings: StoreSettings) -> KeyedJSONStore:
    """Store on the real local filesystem under ``tmp_path``."""
    return KeyedJSONStore(settings)


@pytest.fixture
def fake_fs() -> RecordingFileSystem:
    return RecordingFileSystem()


@pytest.fixture
def fake_store(settings: StoreSettings, fake_fs: RecordingFileSystem) -> KeyedJSONStore:
    """Store on an in-memory filesystem that records calls."""
    return KeyedJSONStore(settings, filesystem=fake_fs)
