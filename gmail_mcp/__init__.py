"""Gmail OAuth 2.0 authentication bootstrap."""
