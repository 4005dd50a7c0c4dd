"""Gmail authentication setup.

Runs the OAuth 2.0 consent flow (opening a browser the first time), saves the
token to .credentials/token.json and verifies access with a profile call.
"""

import logging
import sys

from dotenv import load_dotenv

from gmail_mcp.config import settings
from gmail_mcp.gmail import check_auth_status, create_gmail_auth, get_profile, render_status

logger = logging.getLogger(__name__)

HINT_MARKERS = ("ENOENT", "credentials")

SETUP_HINT = """
Setup required:
   1. Create a Google Cloud project
   2. Enable the Gmail API
   3. Create OAuth 2.0 credentials (Desktop app)
   4. Either:
      - Download credentials.json to project root, OR
      - Set environment variables: GOOGLE_CLIENT_ID, GOOGLE_CLIENT_SECRET, GOOGLE_REDIRECT_URI
"""


def configure_logging() -> None:
    """Configure logging to stderr at the configured level."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def needs_setup_hint(error: Exception) -> bool:
    """Check whether an error looks like missing credentials."""
    if isinstance(error, FileNotFoundError):
        return True
    message = str(error)
    return any(marker in message for marker in HINT_MARKERS)


def authenticate() -> int:
    """Run the authentication flow.

    Returns:
        Process exit code: 0 on success, 1 on any error.
    """
    print("\nGmail MCP Server - Authentication Setup\n")
    print("This will open your browser to authenticate with Google Gmail API.")
    print("Please sign in and grant the requested permissions.\n")

    try:
        auth_manager = create_gmail_auth()

        print("Starting authentication flow...\n")
        gmail = auth_manager.get_gmail_client()

        print("Authentication successful!\n")
        print("Testing Gmail API access...\n")
        profile = get_profile(gmail)

        print("Gmail API access verified!")
        print(f"\nAuthenticated as: {profile.email_address}")
        print(f"   Messages: {profile.messages_total}")
        print(f"   Threads: {profile.threads_total}")

        print("\nAuthentication complete!")
        print(f"\nYour token has been saved to {auth_manager.token_file}\n")
        return 0
    except Exception as e:
        logger.debug("Authentication failed", exc_info=True)
        print("\nAuthentication failed!\n", file=sys.stderr)
        print(f"Error: {e}", file=sys.stderr)
        if needs_setup_hint(e):
            print(SETUP_HINT, file=sys.stderr)
        return 1


def main() -> None:
    """Console entry point for the authentication setup."""
    load_dotenv()
    configure_logging()
    sys.exit(authenticate())


def status_main() -> None:
    """Console entry point printing the authentication status."""
    load_dotenv()
    configure_logging()
    print(render_status(check_auth_status()))


if __name__ == "__main__":
    main()
