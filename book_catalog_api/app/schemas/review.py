"""
Pydantic schemas for book reviews.

A review is free-form text attached to a book.  Its ``id`` is a
random UUID generated when the review is added; ids are never reused.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Review(BaseModel):
    """A single review as stored on a book and returned by the API."""

    id: str
    content: str


class ReviewCreate(BaseModel):
    """Schema for adding a review.

    ``review`` is optional at the schema level so that a missing value
    is reported by the service with the catalog's own message.
    """

    review: Optional[str] = Field(None, examples=["A timeless classic."])

    @field_validator("review", mode="before")
    @classmethod
    def strip_review(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v
