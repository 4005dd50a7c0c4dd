"""Gmail OAuth authentication module.

Handles the OAuth 2.0 consent flow, token storage and revocation. Token
refresh is left to google-auth.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from urllib.parse import urlencode

from google.auth.exceptions import RefreshError, TransportError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow
from googleapiclient.discovery import Resource, build
from pydantic import ValidationError

from gmail_mcp.config import settings
from gmail_mcp.gmail.credentials import load_oauth_credentials
from gmail_mcp.gmail.errors import AuthenticationError, ConfigurationError
from gmail_mcp.gmail.paths import token_path
from gmail_mcp.models import GmailProfile, OAuthCredentials, StoredToken

logger = logging.getLogger(__name__)

# Gmail API scopes required for full email management
SCOPES = [
    "https://www.googleapis.com/auth/gmail.modify",
    "https://www.googleapis.com/auth/gmail.compose",
    "https://www.googleapis.com/auth/gmail.settings.basic",
]

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
REVOKE_URI = "https://oauth2.googleapis.com/revoke"


class GmailAuthManager:
    """Provides authenticated Gmail API clients.

    Loads the stored token when it can still be refreshed, otherwise runs the
    interactive consent flow and stores the new token.
    """

    def __init__(
        self,
        credentials_loader: Callable[[], OAuthCredentials] = load_oauth_credentials,
        token_file: Path | None = None,
        scopes: list[str] | None = None,
    ):
        """Initialize the auth manager.

        Args:
            credentials_loader: Returns the OAuth client credentials.
            token_file: Token location (default .credentials/token.json).
            scopes: OAuth scopes to request (default SCOPES).
        """
        self._load_client = credentials_loader
        self.token_file = token_file or token_path()
        self.scopes = scopes or SCOPES
        self._creds: Credentials | None = None

    def load_stored_token(self) -> Credentials | None:
        """Load the stored token and refresh it.

        The token carries its own client id and secret, so this works without
        a credentials source.

        Returns:
            Refreshed credentials, or None if there is no token or it can no
            longer be refreshed.

        Raises:
            OSError: If the token file exists but cannot be read.
            google.auth.exceptions.TransportError: If the token endpoint is
                unreachable.
        """
        try:
            content = self.token_file.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Token file not found: %s", self.token_file)
            return None

        try:
            stored = StoredToken.model_validate_json(content)
            creds = Credentials.from_authorized_user_info(stored.model_dump(), self.scopes)
        except ValueError as e:
            logger.warning("Ignoring invalid token file %s: %s", self.token_file, e)
            return None

        try:
            creds.refresh(Request())
        except RefreshError as e:
            logger.warning("Stored token could not be refreshed: %s", e)
            return None

        logger.debug("Credentials loaded from %s", self.token_file)
        return creds

    def run_consent_flow(self) -> Credentials:
        """Run the interactive OAuth flow in the browser.

        Blocks until the user completes or abandons the consent page.

        Raises:
            AuthenticationError: If the flow fails.
        """
        client = self._load_client()
        client_config = {
            "installed": {
                "client_id": client.client_id,
                "client_secret": client.client_secret,
                "auth_uri": AUTH_URI,
                "token_uri": TOKEN_URI,
                "redirect_uris": [client.redirect_uri],
            }
        }

        flow = InstalledAppFlow.from_client_config(client_config, self.scopes)
        logger.info(
            "Starting OAuth consent flow on %s (port %s)",
            settings.oauth_callback_host,
            settings.oauth_callback_port or "auto",
        )

        try:
            creds = flow.run_local_server(
                host=settings.oauth_callback_host,
                port=settings.oauth_callback_port,
                open_browser=settings.open_browser,
                authorization_prompt_message=(
                    "Please visit this URL to authorize this application: {url}"
                ),
                access_type="offline",
                prompt="consent",
            )
        except Exception as e:
            raise AuthenticationError(f"OAuth flow failed: {e}") from e

        logger.info("OAuth flow completed successfully")
        return creds

    def save_token(self, creds: Credentials) -> None:
        """Save the refresh token to the token file.

        Raises:
            AuthenticationError: If the credentials carry no refresh token.
        """
        if not creds.refresh_token:
            raise AuthenticationError(
                "No refresh token received. This should not happen with a new authorization."
            )

        client = self._load_client()
        stored = StoredToken(
            client_id=client.client_id,
            client_secret=client.client_secret,
            refresh_token=creds.refresh_token,
        )

        self.token_file.parent.mkdir(parents=True, exist_ok=True)
        self.token_file.write_text(stored.model_dump_json(indent=2), encoding="utf-8")
        logger.debug("Credentials saved to %s", self.token_file)

    def get_credentials(self) -> Credentials:
        """Get valid Gmail API credentials.

        Loads the stored token, or runs the OAuth flow and saves the result.
        """
        if self._creds is not None:
            return self._creds

        creds = self.load_stored_token()
        if creds is None:
            creds = self.run_consent_flow()
            self.save_token(creds)

        self._creds = creds
        return creds

    def has_client_credentials(self) -> bool:
        """Check whether the credentials loader finds a usable source.

        Raises:
            OSError: If the credentials file exists but cannot be read.
            json.JSONDecodeError: If the credentials file is malformed.
        """
        try:
            self._load_client()
        except ConfigurationError as e:
            logger.debug("No OAuth client credentials: %s", e)
            return False
        return True

    def has_valid_token(self) -> bool:
        """Check whether a stored token exists and can be refreshed."""
        try:
            return self.load_stored_token() is not None
        except Exception as e:
            logger.debug("Token check failed: %s", e)
            return False

    def revoke_token(self) -> None:
        """Revoke the current token and delete the token file.

        Revocation at Google is best effort; the local token is always removed.
        """
        refresh_token = self._creds.refresh_token if self._creds else None
        if refresh_token is None:
            try:
                stored = StoredToken.model_validate_json(
                    self.token_file.read_text(encoding="utf-8")
                )
                refresh_token = stored.refresh_token
            except (FileNotFoundError, ValidationError):
                refresh_token = None

        if refresh_token:
            try:
                response = Request()(
                    url=REVOKE_URI,
                    method="POST",
                    body=urlencode({"token": refresh_token}),
                    headers={"content-type": "application/x-www-form-urlencoded"},
                )
                if response.status != 200:
                    logger.warning("Token revocation returned HTTP %s", response.status)
                else:
                    logger.info("Token revoked")
            except TransportError as e:
                logger.warning("Failed to revoke token: %s", e)

        self.token_file.unlink(missing_ok=True)
        self._creds = None
        logger.info("Removed %s", self.token_file)

    def get_gmail_client(self) -> Resource:
        """Get an authenticated Gmail API service."""
        creds = self.get_credentials()
        service = build("gmail", "v1", credentials=creds)
        logger.debug("Gmail service created")
        return service


def get_profile(service: Resource) -> GmailProfile:
    """Fetch the authenticated user's Gmail profile."""
    profile = service.users().getProfile(userId="me").execute()
    return GmailProfile.model_validate(profile)


def create_gmail_auth() -> GmailAuthManager:
    """Create a Gmail authentication manager with default settings."""
    return GmailAuthManager()
