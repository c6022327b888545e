"""Shared test fixtures for Lightbulb Core tests."""
import logging
import os

import pytest

from lightbulb_core.service import LightbulbService


@pytest.fixture(autouse=True)
def clear_lightbulb_env(monkeypatch):
    """Keep LIGHTBULB_* settings from the developer shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("LIGHTBULB_"):
            monkeypatch.delenv(key, raising=False)
    yield


@pytest.fixture(autouse=True)
def quiet_logging():
    """Silence INFO-level transition logs during test runs."""
    logging.getLogger("lightbulb_core").setLevel(logging.WARNING)
    yield


@pytest.fixture
def log_path(tmp_path):
    return str(tmp_path / "lightbulb.log")


@pytest.fixture
def service(log_path):
    return LightbulbService.with_file_log(log_path)

