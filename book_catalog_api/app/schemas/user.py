"""
Pydantic models for user data.

``User`` is the stored record; it only ever holds the salted password
hash and is never returned through the API.  ``Credentials`` is the
body accepted by both ``/register`` and ``/subscriber/login``.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class User(BaseModel):
    """A registered user."""

    username: str
    password_hash: str


class Credentials(BaseModel):
    """Username and password sent by a client.

    Both fields are optional so that missing values produce the
    catalog's 400 message rather than a framework validation error.
    Usernames are stripped; passwords are taken verbatim.
    """

    username: Optional[str] = Field(None, examples=["reader"])
    password: Optional[str] = Field(None, examples=["strongpassword"])

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v

    @property
    def complete(self) -> bool:
        return bool(self.username and self.password)
