"""Pytest fixtures for columnizer tests."""

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Pin environment-driven settings for every test.

    Tracing is disabled, ambiguous-width characters measure 1 column, and stdin retries
    don't sleep.
    """
    monkeypatch.setenv("COLUMNIZER_TRACE_LOG", "")
    monkeypatch.setenv("COLUMNIZER_AMBIGUOUS_WIDTH", "1")
    monkeypatch.setenv("COLUMNIZER_READ_ATTEMPTS", "2")
    monkeypatch.setenv("COLUMNIZER_READ_DELAY_MS", "0")
    yield
