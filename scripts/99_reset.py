#!/usr/bin/env python
"""Revoke the stored Gmail token so the next run re-authenticates."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from gmail_mcp.gmail import create_gmail_auth

load_dotenv()

print("=" * 60)
print("RESETTING GMAIL AUTHENTICATION")
print("=" * 60)
print()

auth_manager = create_gmail_auth()
if not auth_manager.token_file.exists():
    print(f"No token at {auth_manager.token_file}, nothing to reset.")
else:
    auth_manager.revoke_token()
    print(f"Deleted: {auth_manager.token_file}")

print()
print("Authentication reset. Run `gmail-mcp-auth` to sign in again.")
print()
