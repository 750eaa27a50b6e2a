"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a real deployment at
least ``SECRET_KEY`` must be overridden.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Book Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Address the uvicorn server binds to (see ``run.py``).
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Shared secret for signing access tokens.  Tokens live for one
    # hour unless ACCESS_TOKEN_EXPIRE_MINUTES says otherwise.
    secret_key: str = os.getenv("SECRET_KEY", "access")
    algorithm: str = os.getenv("ALGORITHM", "HS256")  # HS256, HS384 or HS512
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

    # The signed token is carried in this cookie.  Set
    # SESSION_COOKIE_SECURE=true when serving over HTTPS.
    session_cookie_name: str = os.getenv("SESSION_COOKIE_NAME", "subscriber_session")
    session_cookie_secure: bool = _env_flag("SESSION_COOKIE_SECURE")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
