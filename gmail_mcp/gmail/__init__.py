"""Gmail integration module.

Provides credential loading, token storage paths and OAuth authentication
for the Gmail API.
"""

from gmail_mcp.gmail.auth import GmailAuthManager, create_gmail_auth, get_profile
from gmail_mcp.gmail.credentials import load_oauth_credentials
from gmail_mcp.gmail.errors import AuthenticationError, ConfigurationError, GmailAuthError
from gmail_mcp.gmail.paths import credentials_dir, credentials_file_path, token_path
from gmail_mcp.gmail.status import check_auth_status, render_status

__all__ = [
    # Auth
    "GmailAuthManager",
    "create_gmail_auth",
    "get_profile",
    # Credentials
    "load_oauth_credentials",
    # Paths
    "credentials_dir",
    "credentials_file_path",
    "token_path",
    # Status
    "check_auth_status",
    "render_status",
    # Errors
    "GmailAuthError",
    "ConfigurationError",
    "AuthenticationError",
]
