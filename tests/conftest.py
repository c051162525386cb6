"""Pytest configuration and fixtures for homedir tests."""

import pytest

from homedir import get_default_cache


@pytest.fixture(autouse=True)
def restore_default_cache():
    """
    Reset the process-wide cache around every test.

    The cache is shared module state, so a value stored by one test would
    otherwise leak into the next.
    """
    cache = get_default_cache()
    was_enabled = cache.enabled
    cache.reset()
    yield
    cache.set_enabled(was_enabled)
    cache.reset()


@pytest.fixture
def fake_home(monkeypatch, tmp_path):
    """
    Point HOME at a temporary directory.

    HOME is consulted first on both Unix-like systems and Windows.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return str(home)
