"""Data models for Gmail OAuth credentials and account state."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REDIRECT_URI = "http://localhost:3000/oauth2callback"


class OAuthCredentials(BaseModel):
    """Normalized OAuth client credentials, whatever their source."""

    model_config = ConfigDict(frozen=True)

    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)
    redirect_uri: str = DEFAULT_REDIRECT_URI


class ClientSecrets(BaseModel):
    """One client shape ("installed" or "web") of a credentials.json file."""

    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1)
    redirect_uris: list[str] = Field(default_factory=list)

    @property
    def redirect_uri(self) -> str:
        """First registered redirect URI, or the default."""
        if self.redirect_uris and self.redirect_uris[0]:
            return self.redirect_uris[0]
        return DEFAULT_REDIRECT_URI


class CredentialsFile(BaseModel):
    """Credentials file as downloaded from Google Cloud Console."""

    installed: ClientSecrets | None = None
    web: ClientSecrets | None = None


class StoredToken(BaseModel):
    """Token document persisted to .credentials/token.json."""

    type: str = "authorized_user"
    client_id: str
    client_secret: str
    refresh_token: str


class GmailProfile(BaseModel):
    """Subset of users.getProfile used to verify access."""

    model_config = ConfigDict(populate_by_name=True)

    email_address: str = Field(alias="emailAddress")
    messages_total: int = Field(default=0, alias="messagesTotal")
    threads_total: int = Field(default=0, alias="threadsTotal")
    history_id: str | None = Field(default=None, alias="historyId")


class AuthStatus(str, Enum):
    """Authentication states reported by the status check."""

    AUTHENTICATED = "AUTHENTICATED"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    NOT_CONFIGURED = "NOT_CONFIGURED"
    ERROR = "ERROR"


class AuthStatusReport(BaseModel):
    """Result of an authentication status check."""

    status: AuthStatus
    email_address: str | None = None
    has_credentials: bool = False
    has_token: bool = False
    error: str | None = None
