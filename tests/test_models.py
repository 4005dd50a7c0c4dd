"""Tests for data models."""

import pytest
from pydantic import ValidationError

from gmail_mcp.models import DEFAULT_REDIRECT_URI, ClientSecrets, OAuthCredentials


def test_credentials_are_frozen():
    creds = OAuthCredentials(client_id="a", client_secret="b")

    with pytest.raises(ValidationError):
        creds.client_id = "c"


def test_credentials_default_redirect_uri():
    assert OAuthCredentials(client_id="a", client_secret="b").redirect_uri == DEFAULT_REDIRECT_URI


def test_credentials_require_values():
    with pytest.raises(ValidationError):
        OAuthCredentials(client_id="", client_secret="b")


def test_client_secrets_first_redirect_uri():
    secrets = ClientSecrets(
        client_id="a",
        client_secret="b",
        redirect_uris=["http://localhost:8080", "http://localhost:9090"],
    )

    assert secrets.redirect_uri == "http://localhost:8080"


def test_client_secrets_blank_first_redirect_uri():
    secrets = ClientSecrets(client_id="a", client_secret="b", redirect_uris=[""])

    assert secrets.redirect_uri == DEFAULT_REDIRECT_URI
