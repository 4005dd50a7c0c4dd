"""OAuth client credential loading.

Credentials come from exactly one source, tried in order:

1. ``GOOGLE_CLIENT_ID`` / ``GOOGLE_CLIENT_SECRET`` (and optionally
   ``GOOGLE_REDIRECT_URI``) environment variables, when both are set.
2. ``credentials.json`` in the project root, in the "installed" or "web"
   layout downloaded from Google Cloud Console.

Values are never merged across sources.
"""

import json
import logging
import os
from collections.abc import Callable, Mapping
from pathlib import Path

from pydantic import ValidationError

from gmail_mcp.gmail.errors import ConfigurationError
from gmail_mcp.gmail.paths import credentials_file_path
from gmail_mcp.models import (
    DEFAULT_REDIRECT_URI,
    ClientSecrets,
    OAuthCredentials,
)

logger = logging.getLogger(__name__)

ENV_CLIENT_ID = "GOOGLE_CLIENT_ID"
ENV_CLIENT_SECRET = "GOOGLE_CLIENT_SECRET"
ENV_REDIRECT_URI = "GOOGLE_REDIRECT_URI"

# Checked in order, first present key wins
CLIENT_SHAPES = ("installed", "web")

FileReader = Callable[[Path], str]
CredentialSource = Callable[[], OAuthCredentials | None]

NOT_CONFIGURED_MESSAGE = (
    "Gmail OAuth credentials not configured!\n\n"
    "Please configure credentials using one of these methods:\n\n"
    "1. Environment Variables:\n"
    f"   Set {ENV_CLIENT_ID}, {ENV_CLIENT_SECRET}, and optionally {ENV_REDIRECT_URI}\n\n"
    "2. Credentials File:\n"
    "   Place credentials.json in the project root directory ({path}).\n"
    "   Download this file from Google Cloud Console:\n"
    "   - Go to https://console.cloud.google.com/apis/credentials\n"
    "   - Create OAuth 2.0 Client ID (Desktop app type)\n"
    "   - Download the JSON file and save as credentials.json\n"
)


def read_text_file(path: Path) -> str:
    """Read a file as UTF-8 text."""
    return path.read_text(encoding="utf-8")


def _env_value(environ: Mapping[str, str], name: str) -> str | None:
    """Return an environment value, treating empty or whitespace-only as unset."""
    value = environ.get(name)
    if value is None or not value.strip():
        return None
    return value


def credentials_from_environment(
    environ: Mapping[str, str],
) -> OAuthCredentials | None:
    """Build credentials from environment variables.

    Returns None unless both client id and secret are set. A partial
    configuration is not an error.
    """
    client_id = _env_value(environ, ENV_CLIENT_ID)
    client_secret = _env_value(environ, ENV_CLIENT_SECRET)

    if client_id is None or client_secret is None:
        if client_id is not None or client_secret is not None:
            logger.debug(
                "Only one of %s/%s is set, ignoring environment",
                ENV_CLIENT_ID,
                ENV_CLIENT_SECRET,
            )
        return None

    logger.debug("OAuth credentials loaded from environment")
    return OAuthCredentials(
        client_id=client_id,
        client_secret=client_secret,
        redirect_uri=_env_value(environ, ENV_REDIRECT_URI) or DEFAULT_REDIRECT_URI,
    )


def credentials_from_file(
    path: Path,
    read_file: FileReader = read_text_file,
) -> OAuthCredentials | None:
    """Build credentials from a Google credentials.json file.

    Returns None if the file does not exist. Other I/O errors and JSON
    decode errors propagate unchanged.

    Raises:
        ConfigurationError: If the file has no usable "installed" or "web" entry.
    """
    try:
        content = read_file(path)
    except FileNotFoundError:
        logger.debug("Credentials file not found: %s", path)
        return None

    data = json.loads(content)

    shape = None
    if isinstance(data, dict):
        shape = next((key for key in CLIENT_SHAPES if data.get(key) is not None), None)

    if shape is None:
        raise ConfigurationError(
            f'{path.name} does not contain "installed" or "web" credentials. '
            "Please download the credentials file from Google Cloud Console."
        )

    try:
        secrets = ClientSecrets.model_validate(data[shape])
    except ValidationError as e:
        raise ConfigurationError(
            f'{path.name} has invalid "{shape}" credentials: {e}'
        ) from e

    logger.debug('OAuth credentials loaded from %s ("%s")', path, shape)
    return OAuthCredentials(
        client_id=secrets.client_id,
        client_secret=secrets.client_secret,
        redirect_uri=secrets.redirect_uri,
    )


def load_oauth_credentials(
    environ: Mapping[str, str] | None = None,
    read_file: FileReader | None = None,
    credentials_path: Path | None = None,
) -> OAuthCredentials:
    """Load OAuth client credentials.

    Priority: environment variables > credentials.json.

    Args:
        environ: Environment lookup (default os.environ).
        read_file: Reads a path as text (default UTF-8 read).
        credentials_path: Credentials file location (default project root).

    Returns:
        Resolved credentials.

    Raises:
        ConfigurationError: If no source provides credentials.
        OSError: If the credentials file exists but cannot be read.
        json.JSONDecodeError: If the credentials file is not valid JSON.
    """
    environ = os.environ if environ is None else environ
    read_file = read_file or read_text_file
    path = credentials_path or credentials_file_path()

    sources: list[CredentialSource] = [
        lambda: credentials_from_environment(environ),
        lambda: credentials_from_file(path, read_file),
    ]

    for source in sources:
        creds = source()
        if creds is not None:
            return creds

    raise ConfigurationError(NOT_CONFIGURED_MESSAGE.format(path=path))
