"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from assetlink.config import reset_default_values
from assetlink.config.settings import get_aas_settings, get_connection_settings
from tests.helpers.remote_fakes import FakeRemoteClient, ManualClock, RecordingSource


@pytest.fixture
def fake_client() -> FakeRemoteClient:
    """Provide a fake remote client."""
    return FakeRemoteClient()


@pytest.fixture
def manual_clock() -> ManualClock:
    """Provide a controllable clock."""
    return ManualClock()


@pytest.fixture
def recording_source_factory():
    """Provide a factory for recording sources."""

    def factory(value: Any = None) -> RecordingSource:
        return RecordingSource(value)

    return factory


@pytest.fixture(autouse=True)
def _isolate_configuration(monkeypatch, tmp_path):
    """Keep tests independent of the developer's .env files and cached settings."""
    monkeypatch.chdir(tmp_path)
    reset_default_values()
    get_aas_settings.cache_clear()
    get_connection_settings.cache_clear()
    yield
    reset_default_values()
    get_aas_settings.cache_clear()
    get_connection_settings.cache_clear()
