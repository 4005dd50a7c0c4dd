"""Shared fixtures for the Gmail auth tests."""

import json
from pathlib import Path

import pytest

from gmail_mcp.gmail.credentials import ENV_CLIENT_ID, ENV_CLIENT_SECRET, ENV_REDIRECT_URI


@pytest.fixture(autouse=True)
def clean_google_env(monkeypatch):
    """Keep the developer's own GOOGLE_* variables out of the tests."""
    for name in (ENV_CLIENT_ID, ENV_CLIENT_SECRET, ENV_REDIRECT_URI):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_credentials(tmp_path):
    """Write a credentials.json document and return its path."""

    def _write(data) -> Path:
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def installed_secrets():
    return {
        "client_id": "installed-client-id",
        "client_secret": "installed-client-secret",
        "redirect_uris": ["http://localhost:8080"],
    }


@pytest.fixture
def web_secrets():
    return {
        "client_id": "web-client-id",
        "client_secret": "web-client-secret",
        "redirect_uris": ["https://example.com/oauth2callback"],
    }
