"""
In‑memory stores for books and users.

Both collections live for the lifetime of the process and are lost on
restart.  ``create_app`` builds one ``BookStore`` and one ``UserStore``
per application instance and attaches them to ``app.state``; the
``get_book_store`` and ``get_user_store`` dependencies hand them to
route handlers.  To move to a persistent backend you would provide
classes with the same methods and change only ``create_app``.

Books are kept in a mapping from a synthetic integer key to ``Book``.
Keys are assigned as ``max(existing keys) + 1`` (``1`` for an empty
store).  If the book with the highest key is deleted, the next book
added receives that same key again.  Lookups by ISBN, author and title
are linear scans; author and title lookups return the first match
only.

Every mutation runs under a per-store ``threading.Lock`` so that the
uniqueness check and the insert happen as one step.
"""

import threading
from typing import Dict, List, Optional, Tuple

from fastapi import Request

from .errors import ConflictError, NotFoundError
from ..schemas.book import Book
from ..schemas.user import User


class BookStore:
    """Mapping of synthetic integer key to ``Book``."""

    def __init__(self, books: Optional[Dict[int, Book]] = None) -> None:
        self._books: Dict[int, Book] = dict(books or {})
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._books)

    def all(self) -> Dict[int, Book]:
        """Return a snapshot of every book keyed by its storage key."""
        return dict(self._books)

    def reviewed(self) -> Dict[int, Book]:
        """Return only the books that carry at least one review."""
        return {key: book for key, book in self._books.items() if book.has_reviews}

    def find_key_by_isbn(self, isbn: str) -> Optional[int]:
        for key, book in self._books.items():
            if book.isbn == isbn:
                return key
        return None

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        key = self.find_key_by_isbn(isbn)
        return self._books[key] if key is not None else None

    def find_by_author(self, author: str) -> Optional[Book]:
        """Return the first book by ``author``, not all of them."""
        return next((b for b in self._books.values() if b.author == author), None)

    def find_by_title(self, title: str) -> Optional[Book]:
        """Return the first book titled ``title``, not all of them."""
        return next((b for b in self._books.values() if b.title == title), None)

    def next_key(self) -> int:
        return max(self._books) + 1 if self._books else 1

    def insert(self, book: Book) -> Tuple[int, Book]:
        """Store ``book`` under the next key.

        Raises ``ConflictError`` if a book with the same ISBN exists.
        """
        with self._lock:
            if self.find_key_by_isbn(book.isbn) is not None:
                raise ConflictError(f"Book with ISBN: {book.isbn} already exists!")
            key = self.next_key()
            self._books[key] = book
            return key, book

    def delete_by_isbn(self, isbn: str) -> Book:
        """Remove the book with ``isbn`` together with its reviews."""
        with self._lock:
            key = self.find_key_by_isbn(isbn)
            if key is None:
                raise NotFoundError(f"Book with ISBN: {isbn} not found!")
            return self._books.pop(key)


class UserStore:
    """Ordered sequence of registered users."""

    def __init__(self, users: Optional[List[User]] = None) -> None:
        self._users: List[User] = list(users or [])
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._users)

    def get(self, username: str) -> Optional[User]:
        return next((u for u in self._users if u.username == username), None)

    def exists(self, username: str) -> bool:
        return self.get(username) is not None

    def add(self, user: User) -> User:
        """Append ``user``; raises ``ConflictError`` if the name is taken."""
        with self._lock:
            if self.exists(user.username):
                raise ConflictError("User already exists!")
            self._users.append(user)
            return user


def get_book_store(request: Request) -> BookStore:
    """FastAPI dependency returning the application's book store."""
    return request.app.state.book_store


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency returning the application's user store."""
    return request.app.state.user_store
