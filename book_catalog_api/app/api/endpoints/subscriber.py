"""
Subscriber endpoints.

``/subscriber/login`` and ``/subscriber/logout`` are open.  Every
route under ``/subscriber/auth`` goes through
``get_current_subscriber`` first and answers 403 without a valid
session.
"""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from book_catalog_api.app.core.errors import CatalogError, to_http_exception
from book_catalog_api.app.core.security import end_session, get_current_subscriber, start_session
from book_catalog_api.app.core.store import BookStore, UserStore, get_book_store, get_user_store
from book_catalog_api.app.schemas.book import BookCreate
from book_catalog_api.app.schemas.review import ReviewCreate
from book_catalog_api.app.schemas.user import Credentials
from book_catalog_api.app.services.book_service import BookService
from book_catalog_api.app.services.review_service import ReviewService
from book_catalog_api.app.services.user_service import UserService


logger = logging.getLogger(__name__)

router = APIRouter()
auth_router = APIRouter(dependencies=[Depends(get_current_subscriber)])


@router.post("/login")
async def login(
    credentials: Credentials,
    response: Response,
    users: UserStore = Depends(get_user_store),
) -> Dict[str, str]:
    """Check the credentials and open a one-hour session.

    The token is only ever sent as the session cookie, never in the
    response body.
    """
    if not credentials.complete:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username and password are required.")
    user = await UserService.authenticate(users, credentials.username, credentials.password)
    if not user:
        logger.warning("Failed login for %s", credentials.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid login details. Check your username and password.",
        )
    start_session(response, user.username)
    logger.info("User %s logged in successfully", user.username)
    return {"message": f"Welcome {user.username}, you are logged in."}


@router.post("/logout")
async def logout(response: Response) -> Dict[str, str]:
    end_session(response)
    return {"message": "You have been logged out."}


@auth_router.post("/add-book", status_code=status.HTTP_201_CREATED)
async def add_book(data: Optional[BookCreate] = None, books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Add a book with a new ISBN to the catalog."""
    try:
        _, book = BookService.add_book(books, data)
    except CatalogError as e:
        raise to_http_exception(e)
    return {"message": "Book added successfully!", "book": book.to_dict()}


@auth_router.put("/add-review-isbn/{isbn}")
async def add_review(
    isbn: str,
    data: Optional[ReviewCreate] = None,
    books: BookStore = Depends(get_book_store),
) -> Dict[str, Any]:
    """Append a review to a book and return the whole book."""
    try:
        book = ReviewService.add_review(books, isbn, data)
    except CatalogError as e:
        raise to_http_exception(e)
    return {"book": book.to_dict()}


@auth_router.delete("/delete-book-isbn/{isbn}")
async def delete_book(isbn: str, books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Remove a book and all of its reviews."""
    try:
        book = BookService.delete_book(books, isbn)
    except CatalogError as e:
        raise to_http_exception(e)
    return {"message": "Book deleted successfully.", "deletedBook": book.to_dict()}


@auth_router.delete("/delete-review-isbn/{isbn}")
async def delete_reviews(isbn: str, books: BookStore = Depends(get_book_store)) -> Dict[str, Any]:
    """Clear every review of a book."""
    try:
        book = ReviewService.clear_reviews(books, isbn)
    except CatalogError as e:
        raise to_http_exception(e)
    return {"message": "All reviews deleted successfully.", "book": book.to_dict()}


@auth_router.delete("/delete-review-isbn-reviewID/{isbn}/{review_id}")
async def delete_review(isbn: str, review_id: str, books: BookStore = Depends(get_book_store)) -> Dict[str, str]:
    """Remove a single review by its id."""
    try:
        ReviewService.delete_review(books, isbn, review_id)
    except CatalogError as e:
        raise to_http_exception(e)
    return {"message": f"Review with Review ID: {review_id} deleted successfully."}


router.include_router(auth_router, prefix="/auth")
