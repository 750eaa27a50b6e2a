"""
Guest endpoints.

Anyone may register, list the catalog, look books up by ISBN, author
or title and read reviews.  None of these routes require a session.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from book_catalog_api.app.core.errors import CatalogError, to_http_exception
from book_catalog_api.app.core.store import BookStore, UserStore, get_book_store, get_user_store
from book_catalog_api.app.schemas.book import books_to_dict
from book_catalog_api.app.schemas.user import Credentials
from book_catalog_api.app.services.book_service import BookService
from book_catalog_api.app.services.user_service import UserService


router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    credentials: Credentials,
    users: UserStore = Depends(get_user_store),
) -> Dict[str, str]:
    """Register a new user.

    Username and password are both required.  The password is stored
    only as a salted hash and is never echoed back.
    """
    try:
        await UserService.register(users, credentials)
    except CatalogError as e:
        raise to_http_exception(e)
    return {"message": "User successfully registered. Now you can login."}


@router.get("/")
async def list_books(books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Return the whole catalog keyed by storage key."""
    try:
        return books_to_dict(BookService.list_books(books))
    except CatalogError as e:
        raise to_http_exception(e)


@router.get("/isbn/{isbn}")
async def get_book_by_isbn(isbn: str, books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    try:
        return BookService.get_by_isbn(books, isbn).to_dict()
    except CatalogError as e:
        raise to_http_exception(e)


@router.get("/author/{author}")
async def get_book_by_author(author: str, books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Return the first book by the author.

    A miss is answered with 400, not 404.
    """
    try:
        return BookService.get_by_author(books, author).to_dict()
    except CatalogError as e:
        raise to_http_exception(e)


@router.get("/title/{title}")
async def get_book_by_title(title: str, books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Return the first book with the title.

    A miss is answered with 400, not 404.
    """
    try:
        return BookService.get_by_title(books, title).to_dict()
    except CatalogError as e:
        raise to_http_exception(e)


@router.get("/review/{isbn}")
async def get_book_reviews(isbn: str, books: BookStore = Depends(get_book_store)) -> List[Dict[str, Any]]:
    """Return the reviews of a book, possibly an empty list."""
    try:
        return [review.model_dump() for review in BookService.get_reviews(books, isbn)]
    except CatalogError as e:
        raise to_http_exception(e)


@router.get("/book-reviews")
async def list_reviewed_books(books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Return only the books that have at least one review."""
    try:
        return books_to_dict(BookService.list_reviewed(books))
    except CatalogError as e:
        raise to_http_exception(e)
