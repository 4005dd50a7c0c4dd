"""Filesystem locations for OAuth client credentials and the stored token.

Paths are anchored at the project root (the directory holding the
``gmail_mcp`` package), so they do not depend on the working directory.

Run from a source checkout or an editable install (``pip install -e .``).
After a regular ``pip install .`` the anchor is site-packages, and
credentials.json and .credentials/ are looked up there.
"""

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

CREDENTIALS_DIR_NAME = ".credentials"
TOKEN_FILE_NAME = "token.json"
CREDENTIALS_FILE_NAME = "credentials.json"


def credentials_dir() -> Path:
    """Directory holding the persisted OAuth token."""
    return PROJECT_ROOT / CREDENTIALS_DIR_NAME


def token_path() -> Path:
    """Path of the persisted OAuth token."""
    return credentials_dir() / TOKEN_FILE_NAME


def credentials_file_path() -> Path:
    """Path of the Google Cloud Console credentials file."""
    return PROJECT_ROOT / CREDENTIALS_FILE_NAME
