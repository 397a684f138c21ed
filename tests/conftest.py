"""Shared fixtures."""

import logging

import pytest

from lodestone.config.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_global_state(monkeypatch):
    """Keep settings and CLI log handlers from leaking between tests."""
    monkeypatch.delenv("DEBUG_MODE", raising=False)
    reset_settings()
    yield
    reset_settings()
    logger = logging.getLogger("lodestone")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
