from __future__ import annotations

import io

import pytest
from rich.console import Console


@pytest.fixture
def console_buffer():
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    return console, buffer


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("API_FETCHER_TARGET_URL", "API_FETCHER_HTTP_TIMEOUT_SECONDS", "API_FETCHER_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
