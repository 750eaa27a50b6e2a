"""Print a signed session token for manual testing.

Usage:
    python create_token.py <username> [lifetime_seconds]

Send the output as the ``subscriber_session`` cookie (or whatever
SESSION_COOKIE_NAME is set to) on requests under ``/subscriber/auth``.
"""
import sys

from book_catalog_api.app.core.security import create_access_token

if len(sys.argv) < 2:
    sys.exit(__doc__)
lifetime = int(sys.argv[2]) if len(sys.argv) > 2 else None
print(create_access_token({"sub": sys.argv[1]}, expires_delta=lifetime))
