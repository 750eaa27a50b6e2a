"""
Pydantic schemas for catalog books.

``Book`` is both the stored record and the response shape.  The
``reviews`` list stays ``None`` until the first review is added, and
books are always serialized with ``exclude_none`` so clients see no
``reviews`` key for a book that was never reviewed.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .review import Review


class Book(BaseModel):
    """A book in the shared catalog."""

    isbn: str
    title: str
    author: str
    reviews: Optional[List[Review]] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)

    @property
    def has_reviews(self) -> bool:
        return bool(self.reviews)


class BookCreate(BaseModel):
    """Schema for adding a book.

    All fields are optional here; presence is checked by
    ``BookService.add_book`` which reports the missing details.
    """

    isbn: Optional[str] = Field(None, examples=["9780141439518"])
    author: Optional[str] = Field(None, examples=["Jane Austen"])
    title: Optional[str] = Field(None, examples=["Pride and Prejudice"])

    @field_validator("isbn", "author", "title", mode="before")
    @classmethod
    def strip_text(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v


def books_to_dict(books: Dict[int, Book]) -> Dict[str, Dict[str, Any]]:
    """Render a key → book mapping the way the catalog listing returns it."""
    return {str(key): book.to_dict() for key, book in books.items()}
