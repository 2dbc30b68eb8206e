"""
Shared test fixtures.
"""

import pytest
import structlog

from product_codes import log
from product_codes.config import get_settings


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Reset cached settings and logging configuration around each test."""
    monkeypatch.delenv("PRODUCT_CODES_LOG_CLASSIFICATIONS", raising=False)
    monkeypatch.delenv("PRODUCT_CODES_LOG_FORMAT", raising=False)
    monkeypatch.delenv("PRODUCT_CODES_LOG_LEVEL", raising=False)
    monkeypatch.setattr(log, "_log_classifications", False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
