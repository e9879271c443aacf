"""Shared fixtures."""

import json
import os
from pathlib import Path

import pytest

from zermelo.config import reset_settings

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from ZERMELO_* variables and cached settings."""
    for name in list(os.environ):
        if name.startswith("ZERMELO_"):
            monkeypatch.delenv(name)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def appointments_response():
    """Load appointments fixture."""
    with open(FIXTURES_DIR / "appointments.json") as f:
        return json.load(f)


@pytest.fixture
def token_response():
    """Load token fixture."""
    with open(FIXTURES_DIR / "token.json") as f:
        return json.load(f)
