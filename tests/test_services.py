"""Service-level tests, including concurrent registration."""

import asyncio

import pytest

from book_catalog_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from book_catalog_api.app.core.store import BookStore, UserStore
from book_catalog_api.app.schemas.book import BookCreate
from book_catalog_api.app.schemas.review import ReviewCreate
from book_catalog_api.app.schemas.user import Credentials
from book_catalog_api.app.services.book_service import BookService
from book_catalog_api.app.services.review_service import ReviewService
from book_catalog_api.app.services.user_service import UserService


def test_register_stores_only_hash():
    users = UserStore()
    user = asyncio.run(UserService.register(users, Credentials(username="ann", password="pw")))
    assert user.password_hash != "pw"
    assert asyncio.run(UserService.authenticate(users, "ann", "pw")) == user
    assert asyncio.run(UserService.authenticate(users, "ann", "nope")) is None


def test_concurrent_registration_of_same_name_admits_one():
    users = UserStore()

    async def race():
        creds = Credentials(username="ann", password="pw")
        return await asyncio.gather(
            UserService.register(users, creds),
            UserService.register(users, creds),
            return_exceptions=True,
        )

    results = asyncio.run(race())
    assert sum(isinstance(r, ConflictError) for r in results) == 1
    assert len(users) == 1


def test_register_requires_both_fields():
    with pytest.raises(ValidationError):
        asyncio.run(UserService.register(UserStore(), Credentials(username="ann")))


def test_add_book_and_lookups():
    books = BookStore()
    key, book = BookService.add_book(books, BookCreate(isbn=" 1 ", author="A", title="T"))
    assert key == 1
    assert book.isbn == "1"
    assert BookService.get_by_isbn(books, "1") is book
    with pytest.raises(ValidationError):
        BookService.get_by_author(books, "Nobody")
    with pytest.raises(NotFoundError):
        BookService.get_by_isbn(books, "2")


def test_review_lifecycle():
    books = BookStore()
    BookService.add_book(books, BookCreate(isbn="1", author="A", title="T"))
    assert BookService.get_by_isbn(books, "1").reviews is None
    book = ReviewService.add_review(books, "1", ReviewCreate(review="good"))
    review_id = book.reviews[0].id
    assert BookService.list_reviewed(books) == {1: book}
    removed = ReviewService.delete_review(books, "1", review_id)
    assert removed.content == "good"
    assert BookService.get_reviews(books, "1") == []
    with pytest.raises(NotFoundError):
        BookService.list_reviewed(books)
    with pytest.raises(ValidationError):
        ReviewService.clear_reviews(books, "1")


def test_review_ids_are_unique():
    books = BookStore()
    BookService.add_book(books, BookCreate(isbn="1", author="A", title="T"))
    for i in range(20):
        ReviewService.add_review(books, "1", ReviewCreate(review=f"r{i}"))
    ids = [r.id for r in books.find_by_isbn("1").reviews]
    assert len(set(ids)) == 20


def test_missing_bodies_are_treated_as_empty():
    books = BookStore()
    with pytest.raises(ValidationError):
        BookService.add_book(books, None)
    with pytest.raises(NotFoundError):
        ReviewService.add_review(books, "1", None)
    BookService.add_book(books, BookCreate(isbn="1", author="A", title="T"))
    with pytest.raises(ValidationError):
        ReviewService.add_review(books, "1", None)
