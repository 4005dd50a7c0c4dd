"""Exceptions raised by the Gmail authentication modules.

File-system failures surface as ``OSError`` and malformed JSON as
``json.JSONDecodeError``; neither is wrapped.
"""


class GmailAuthError(Exception):
    """Base class for Gmail authentication errors."""


class ConfigurationError(GmailAuthError):
    """No usable OAuth client credential source was found."""


class AuthenticationError(GmailAuthError):
    """The OAuth consent flow or token handling failed."""
