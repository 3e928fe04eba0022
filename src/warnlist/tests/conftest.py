"""Shared fixtures: isolate settings and logging between tests."""

from __future__ import annotations

import pytest

from warnlist.config import clear_settings_cache
from warnlist.log import reset_logging


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> object:
    """Drop WARNLIST_* variables and cached settings/logging around each test."""
    import os
    for key in [k for k in os.environ if k.startswith("WARNLIST_")]:
        monkeypatch.delenv(key)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
