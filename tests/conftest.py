# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

import logging
import os
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "sarif"
GOVULNCHECK_SARIF = FIXTURES_DIR / "govulncheck.json"


@pytest.fixture
def sample_path() -> Path:
    return GOVULNCHECK_SARIF


@pytest.fixture
def sample_bytes() -> bytes:
    return GOVULNCHECK_SARIF.read_bytes()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep SARIFDOC_* variables from the host out of the tests."""
    for key in list(os.environ):
        if key.startswith("SARIFDOC_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by setup_logging() so they never outlive a test."""
    yield
    logger = logging.getLogger("sarifdoc")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
