#!/usr/bin/env python
"""Check current Gmail authentication status."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from gmail_mcp.gmail import check_auth_status, credentials_file_path, render_status, token_path

load_dotenv()

print("=" * 60)
print("GMAIL AUTH STATUS")
print("=" * 60)
print()
print(f"Credentials file: {credentials_file_path()}")
print(f"Token file:       {token_path()}")
print()

print(render_status(check_auth_status()))
