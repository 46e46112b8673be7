"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from loguru import logger

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample documents and expected outputs."""
    return FIXTURES


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep GENDIFF_* settings from the developer's shell out of the tests."""
    monkeypatch.delenv("GENDIFF_FORMAT", raising=False)
    monkeypatch.delenv("GENDIFF_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added during a test (the CLI binds them to captured streams)."""
    yield
    logger.remove()
