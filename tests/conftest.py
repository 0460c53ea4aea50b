"""Shared fixtures for the codekit test-suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep AppSettings away from the developer's .env and CODEKIT_* vars."""

    for name in ("CODEKIT_LOG_LEVEL", "CODEKIT_SHOW_BANNER", "CODEKIT_CHARSET_CASE_SENSITIVE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
