"""Pytest configuration and fixtures."""

import pytest

from maze_solver.config import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep MAZE_* variables and the settings cache out of each test."""
    for name in (
        "MAZE_INPUT_PATH",
        "MAZE_OUTPUT_PATH",
        "MAZE_INCLUDE_ENDPOINTS",
        "MAZE_JSON_INDENT",
        "MAZE_LOG_LEVEL",
        "MAZE_SHOW_MAZE",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
