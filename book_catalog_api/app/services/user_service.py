"""
Business logic for users.

Registration hashes the password in a worker thread before the user
is stored; only the salted hash is ever kept.  Authentication looks
the user up by name and verifies the password against that hash.
"""

import logging
from typing import Optional

from fastapi.concurrency import run_in_threadpool

from ..core.errors import ConflictError, ValidationError
from ..core.security import hash_password, verify_password
from ..core.store import UserStore
from ..schemas.user import Credentials, User


logger = logging.getLogger(__name__)


class UserService:
    """Registration and credential checks against a ``UserStore``."""

    @classmethod
    async def register(cls, users: UserStore, credentials: Credentials) -> User:
        """Create a new user.

        Raises ``ValidationError`` when username or password is missing
        and ``ConflictError`` when the username is taken.  The store
        re-checks uniqueness while holding its lock, so two concurrent
        registrations for one name cannot both succeed.
        """
        if not credentials.complete:
            raise ValidationError("Username and password are required.")
        if users.exists(credentials.username):
            logger.info("Registration refused, user %s already exists", credentials.username)
            raise ConflictError("User already exists!")
        hashed = await run_in_threadpool(hash_password, credentials.password)
        user = users.add(User(username=credentials.username, password_hash=hashed))
        logger.info("User %s registered successfully", user.username)
        return user

    @classmethod
    async def authenticate(cls, users: UserStore, username: str, password: str) -> Optional[User]:
        """Return the user if ``password`` matches, otherwise ``None``."""
        user = users.get(username)
        if user is None:
            return None
        if await run_in_threadpool(verify_password, password, user.password_hash):
            return user
        return None
