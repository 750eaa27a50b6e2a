"""
Business logic for catalog books.

Lookups trim their input and reject empty values.  Author and title
lookups answer a miss with ``ValidationError`` (HTTP 400) rather than
``NotFoundError``.  Existing clients rely on that status, so it stays
as is.
"""

import logging
from typing import Dict, List, Optional, Tuple

from ..core.errors import NotFoundError, ValidationError
from ..core.store import BookStore
from ..schemas.book import Book, BookCreate
from ..schemas.review import Review


logger = logging.getLogger(__name__)


def _require(value: str, message: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValidationError(message)
    return value


class BookService:
    """Read and write operations on a ``BookStore``."""

    @classmethod
    def list_books(cls, books: BookStore) -> Dict[int, Book]:
        if not len(books):
            raise NotFoundError("No books found!")
        return books.all()

    @classmethod
    def get_by_isbn(cls, books: BookStore, isbn: str) -> Book:
        isbn = _require(isbn, "ISBN is required.")
        book = books.find_by_isbn(isbn)
        if book is None:
            raise NotFoundError(f"Book with ISBN {isbn} not found.")
        return book

    @classmethod
    def get_by_author(cls, books: BookStore, author: str) -> Book:
        """Return the first book by ``author``."""
        author = _require(author, "Author name is required.")
        book = books.find_by_author(author)
        if book is None:
            raise ValidationError(f"Book with author name: {author} not found!")
        return book

    @classmethod
    def get_by_title(cls, books: BookStore, title: str) -> Book:
        """Return the first book titled ``title``."""
        title = _require(title, "Title is required.")
        book = books.find_by_title(title)
        if book is None:
            raise ValidationError(f"Book with title: {title} not found!")
        return book

    @classmethod
    def get_reviews(cls, books: BookStore, isbn: str) -> List[Review]:
        isbn = _require(isbn, "ISBN is required.")
        book = books.find_by_isbn(isbn)
        if book is None:
            raise NotFoundError(f"Book with {isbn} not found.")
        return list(book.reviews or [])

    @classmethod
    def list_reviewed(cls, books: BookStore) -> Dict[int, Book]:
        reviewed = books.reviewed()
        if not reviewed:
            raise NotFoundError("No reviewed books found!")
        return reviewed

    @classmethod
    def add_book(cls, books: BookStore, data: Optional[BookCreate]) -> Tuple[int, Book]:
        """Add a book under the next synthetic key.

        Raises ``ValidationError`` if any of isbn, author or title is
        missing and ``ConflictError`` if the ISBN is already present.
        """
        if data is None:
            data = BookCreate()
        if not (data.isbn and data.author and data.title):
            logger.info("Invalid book input: %s", data.model_dump())
            raise ValidationError("Please ensure that all the book details are entered.")
        key, book = books.insert(Book(isbn=data.isbn, author=data.author, title=data.title))
        logger.info("Book %s added under key %s", book.isbn, key)
        return key, book

    @classmethod
    def delete_book(cls, books: BookStore, isbn: str) -> Book:
        """Remove a book; a blank ISBN simply matches nothing."""
        isbn = (isbn or "").strip()
        book = books.delete_by_isbn(isbn)
        logger.info("Book %s deleted", isbn)
        return book
