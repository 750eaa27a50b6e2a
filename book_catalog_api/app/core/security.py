"""
Security helpers for password hashing and session tokens.

Tokens are compact JWTs signed with HMAC.  ``settings.algorithm``
picks the digest (``HS256``, ``HS384`` or ``HS512``) and is written to
the token header; a token whose header names another algorithm is
refused.  The payload carries the username as ``sub`` and an ``exp``
timestamp.

The signed token is the whole session: ``/subscriber/login`` stores it
in an HttpOnly cookie and ``get_current_subscriber`` reads it back on
every request under ``/subscriber/auth``.  No server-side session
table exists, so logging in again simply replaces the cookie.

Passwords are hashed with PBKDF2‑HMAC (SHA‑256) and a random salt per
password, stored as ``salt_hex$hash_hex``.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, Response, status

from .config import settings


logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000

HMAC_DIGESTS = {
    "HS256": hashlib.sha256,
    "HS384": hashlib.sha384,
    "HS512": hashlib.sha512,
}


def _b64_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _b64_decode(text: str) -> bytes:
    return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))


def _json_segment(obj: Dict[str, Any]) -> str:
    return _b64_encode(json.dumps(obj, separators=(",", ":")).encode("utf-8"))


def _signature(signing_input: str, algorithm: str) -> bytes:
    digest = HMAC_DIGESTS.get(algorithm)
    if digest is None:
        raise ValueError(f"Unsupported token algorithm: {algorithm}")
    return hmac.new(settings.secret_key.encode("utf-8"), signing_input.encode("ascii"), digest).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Sign ``data`` plus an ``exp`` claim.

    ``expires_delta`` is the lifetime in seconds and defaults to
    ``ACCESS_TOKEN_EXPIRE_MINUTES``.  A negative value yields a token
    that is already expired.
    """
    if expires_delta is None:
        expires_delta = settings.access_token_expire_minutes * 60
    claims = dict(data, exp=int(time.time()) + expires_delta)
    signing_input = _json_segment({"alg": settings.algorithm, "typ": "JWT"}) + "." + _json_segment(claims)
    return signing_input + "." + _b64_encode(_signature(signing_input, settings.algorithm))


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Return the claims of a valid, unexpired token, else ``None``."""
    try:
        header_b64, payload_b64, signature_b64 = token.split(".")
        header = json.loads(_b64_decode(header_b64))
        if header.get("alg") != settings.algorithm:
            return None
        expected = _signature(f"{header_b64}.{payload_b64}", settings.algorithm)
        if not hmac.compare_digest(expected, _b64_decode(signature_b64)):
            return None
        claims = json.loads(_b64_decode(payload_b64))
        if int(claims["exp"]) < time.time():
            return None
        return claims
    except (ValueError, TypeError, AttributeError, KeyError):
        # Wrong segment count, bad base64 or JSON, or a payload
        # without a numeric ``exp``.
        return None



def start_session(response: Response, username: str) -> None:
    """Issue a token for ``username`` and bind it to the session cookie."""
    max_age = settings.access_token_expire_minutes * 60
    token = create_access_token({"sub": username}, expires_delta=max_age)
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=max_age,
        path="/subscriber",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def end_session(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/subscriber",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def get_current_subscriber(request: Request) -> Dict[str, str]:
    """Dependency guarding the ``/subscriber/auth`` routes.

    Reads the token from the session cookie.  A missing token or one
    that fails verification (bad signature, expired, malformed) is
    rejected with HTTP 403.  On success the decoded payload is attached
    to ``request.state.user`` and returned.
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not logged in.")
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        logger.warning("Rejected invalid or expired session token")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not authenticated")
    request.state.user = payload
    return payload


def _pbkdf2(password: str, salt: bytes) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)


def hash_password(password: str) -> str:
    """Return ``salt_hex$hash_hex`` for ``password`` with a fresh 16-byte salt."""
    salt = os.urandom(16)
    return f"{salt.hex()}${_pbkdf2(password, salt).hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Constant-time check of ``plain_password`` against a stored hash.

    A stored value that is not ``salt_hex$hash_hex`` never matches.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt, expected = bytes.fromhex(salt_hex), bytes.fromhex(hash_hex)
    except ValueError:
        return False
    return hmac.compare_digest(_pbkdf2(plain_password, salt), expected)
