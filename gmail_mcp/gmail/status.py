"""Gmail authentication status report."""

import logging

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from gmail_mcp.gmail.auth import GmailAuthManager, get_profile
from gmail_mcp.models import AuthStatus, AuthStatusReport

logger = logging.getLogger(__name__)

SETUP_STEPS = """\
1. Create a Google Cloud project at https://console.cloud.google.com/
2. Enable the Gmail API
3. Create OAuth 2.0 credentials (Desktop app)
4. Either:
   - Download credentials.json to the project root, OR
   - Set GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET and optionally GOOGLE_REDIRECT_URI
5. Run `gmail-mcp-auth`
"""


def check_auth_status(manager: GmailAuthManager | None = None) -> AuthStatusReport:
    """Check whether Gmail access is configured and working.

    Never starts the interactive consent flow. A stored token is tried even
    without a credentials source, since it carries its own client id.
    """
    manager = manager or GmailAuthManager()
    has_credentials = False
    has_token = False

    try:
        has_token = manager.token_file.exists()
        has_credentials = manager.has_client_credentials()

        if has_token:
            creds = manager.load_stored_token()
            if creds is not None:
                service = build("gmail", "v1", credentials=creds)
                try:
                    profile = get_profile(service)
                except HttpError as e:
                    logger.warning("Profile check failed with stored token: %s", e)
                else:
                    return AuthStatusReport(
                        status=AuthStatus.AUTHENTICATED,
                        email_address=profile.email_address,
                        has_credentials=has_credentials,
                        has_token=True,
                    )

        status = AuthStatus.NOT_AUTHENTICATED if has_credentials else AuthStatus.NOT_CONFIGURED
        return AuthStatusReport(
            status=status,
            has_credentials=has_credentials,
            has_token=has_token,
        )
    except Exception as e:
        logger.warning("Auth status check failed: %s", e)
        return AuthStatusReport(
            status=AuthStatus.ERROR,
            has_credentials=has_credentials,
            has_token=has_token,
            error=str(e),
        )


def render_status(report: AuthStatusReport) -> str:
    """Render a status report as markdown."""
    lines = ["# Gmail Authentication Status", ""]

    if report.status == AuthStatus.AUTHENTICATED:
        lines += [
            "**AUTHENTICATED**",
            "",
            f"You are authenticated with Gmail as: **{report.email_address}**",
        ]
    elif report.status == AuthStatus.NOT_AUTHENTICATED:
        lines += [
            "**NOT AUTHENTICATED**",
            "",
            "OAuth credentials are configured but no valid token was found.",
            "Run `gmail-mcp-auth` to sign in.",
        ]
    elif report.status == AuthStatus.NOT_CONFIGURED:
        lines += [
            "**NOT CONFIGURED**",
            "",
            "No OAuth credentials found. To set up Gmail access:",
            "",
            SETUP_STEPS,
        ]
    else:
        lines += [
            "**ERROR**",
            "",
            f"Error checking authentication status: {report.error}",
        ]

    return "\n".join(lines).rstrip() + "\n"
