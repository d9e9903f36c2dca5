from __future__ import annotations

import logging

import pytest

from pdflinks.core import Settings

_ENV_VARS = (
    "PDFLINKS_OUTPUT",
    "PDFLINKS_DIR",
    "PDFLINKS_USER_AGENT",
    "PDFLINKS_CONNECT_TIMEOUT",
    "PDFLINKS_PAGE_TIMEOUT",
    "PDFLINKS_FILE_TIMEOUT",
    "PDFLINKS_STRICT_STATUS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's PDFLINKS_* variables out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    logging.getLogger("pdflinks").setLevel(logging.NOTSET)


@pytest.fixture
def settings() -> Settings:
    return Settings()
