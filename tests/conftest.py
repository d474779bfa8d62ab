"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import configutils...' and
'import actions...' work, and provides shared settings fixtures.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from configutils.config.accessor import SettingsAccessor  # noqa: E402
from configutils.config.settings import reset_settings  # noqa: E402
from configutils.config.stores import MappingStore  # noqa: E402


@pytest.fixture
def make_settings():
    """
    Factory fixture: build a SettingsAccessor over an in-memory store.

    Usage:
        def test_x(make_settings):
            settings = make_settings({"PORT": "8080"})
    """
    def _make(values, **kwargs):
        return SettingsAccessor(MappingStore(values), **kwargs)
    return _make


@pytest.fixture(autouse=True)
def _fresh_global_settings():
    """Make sure no test sees a settings singleton cached by another test."""
    reset_settings()
    yield
    reset_settings()
