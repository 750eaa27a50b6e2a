"""
Business logic for reviews.

Reviews live on their book in insertion order.  Each review gets a
fresh UUID4 string id when it is added.  Removing a single review
leaves the others and their order untouched.
"""

import logging
import uuid
from typing import Optional

from ..core.errors import NotFoundError, ValidationError
from ..core.store import BookStore
from ..schemas.book import Book
from ..schemas.review import Review, ReviewCreate


logger = logging.getLogger(__name__)


class ReviewService:
    """Service for adding and removing book reviews."""

    @classmethod
    def _find_book(cls, books: BookStore, isbn: str) -> Book:
        book = books.find_by_isbn(isbn)
        if book is None:
            raise NotFoundError(f"Book with ISBN: {isbn} not found!")
        return book

    @classmethod
    def add_review(cls, books: BookStore, isbn: str, data: Optional[ReviewCreate]) -> Book:
        """Append a review to the book and return the updated book.

        The book is looked up first, so a missing book wins over a
        missing review body.
        """
        isbn = (isbn or "").strip()
        book = cls._find_book(books, isbn)
        if data is None or not data.review:
            raise ValidationError("Review information is required.")
        review = Review(id=str(uuid.uuid4()), content=data.review)
        if book.reviews is None:
            book.reviews = []
        book.reviews.append(review)
        logger.info("Review %s added to book %s", review.id, isbn)
        return book

    @classmethod
    def clear_reviews(cls, books: BookStore, isbn: str) -> Book:
        """Remove every review from the book."""
        isbn = (isbn or "").strip()
        book = cls._find_book(books, isbn)
        if not book.reviews:
            raise ValidationError("No reviews to delete.")
        book.reviews = []
        logger.info("All reviews deleted for book %s", isbn)
        return book

    @classmethod
    def delete_review(cls, books: BookStore, isbn: str, review_id: str) -> Review:
        """Remove exactly one review, identified by ``review_id``."""
        isbn = (isbn or "").strip()
        review_id = (review_id or "").strip()
        if not isbn:
            raise ValidationError("ISBN is required.")
        if not review_id:
            raise ValidationError("Review ID is required.")
        book = cls._find_book(books, isbn)
        if not book.reviews:
            raise ValidationError("No reviews to delete.")
        for index, review in enumerate(book.reviews):
            if review.id == review_id:
                del book.reviews[index]
                logger.info("Review %s deleted from book %s", review_id, isbn)
                return review
        raise NotFoundError(f"Review with ID: {review_id} not found!")
