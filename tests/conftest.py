import os

# Must be set before telegraph_line.config is imported
os.environ.setdefault("TELEGRAPH_ENV", "test")

import pytest


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch):
    """Keep the operator in echo mode unless a test opts in"""
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
