"""Book catalog API client.

This module defines a thin client wrapper around the Book Catalog API.
It uses a ``requests.Session`` internally, so the session cookie set
by :meth:`BookCatalogClient.login` is sent automatically on every later
call to the ``/subscriber/auth`` routes.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is ``None`` (or an empty
container for listings) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.  Network failures are reported the
same way with ``status_code`` set to ``None``.

Example::

    client = BookCatalogClient(base_url="http://localhost:8000")
    client.register("reader", "secret")
    client.login("reader", "secret")
    client.add_book(isbn="123", author="A", title="T")
    book, error = client.get_by_isbn("123")
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class BookCatalogClient:
    """Client for the guest and subscriber routes of the catalog."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/isbn/123``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    message = exc.response.json().get("message", "")
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _segment(value: str) -> str:
        return quote(str(value), safe="")

    # ------------------------------------------------------------------
    # Account operations
    # ------------------------------------------------------------------
    def register(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/register", json_body={"username": username, "password": password})

    def login(self, username: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log in; the session cookie is kept on :attr:`session`."""
        return self._request("POST", "/subscriber/login", json_body={"username": username, "password": password})

    def logout(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("POST", "/subscriber/logout")

    # ------------------------------------------------------------------
    # Browsing
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[Dict[str, Any], Optional[Error]]:
        """Retrieve the whole catalog keyed by storage key.

        An empty catalog is answered by the server with 404; it is
        returned here as an empty mapping together with the error.
        """
        data, error = self._request("GET", "/")
        return (data or {}), error

    def get_by_isbn(self, isbn: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/isbn/{self._segment(isbn)}")

    def get_by_author(self, author: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/author/{self._segment(author)}")

    def get_by_title(self, title: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._request("GET", f"/title/{self._segment(title)}")

    def get_reviews(self, isbn: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", f"/review/{self._segment(isbn)}")
        return (data or []), error

    def list_reviewed(self) -> Tuple[Dict[str, Any], Optional[Error]]:
        data, error = self._request("GET", "/book-reviews")
        return (data or {}), error

    # ------------------------------------------------------------------
    # Subscriber operations (require login)
    # ------------------------------------------------------------------
    def add_book(self, *, isbn: str, author: str, title: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a book and return the created record."""
        data, error = self._request(
            "POST",
            "/subscriber/auth/add-book",
            json_body={"isbn": isbn, "author": author, "title": title},
        )
        if error:
            return None, error
        return data.get("book"), None

    def add_review(self, isbn: str, review: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add a review and return the updated book."""
        data, error = self._request(
            "PUT",
            f"/subscriber/auth/add-review-isbn/{self._segment(isbn)}",
            json_body={"review": review},
        )
        if error:
            return None, error
        return data.get("book"), None

    def delete_book(self, isbn: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Delete a book and return the removed record."""
        data, error = self._request("DELETE", f"/subscriber/auth/delete-book-isbn/{self._segment(isbn)}")
        if error:
            return None, error
        return data.get("deletedBook"), None

    def delete_reviews(self, isbn: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("DELETE", f"/subscriber/auth/delete-review-isbn/{self._segment(isbn)}")
        if error:
            return None, error
        return data.get("book"), None

    def delete_review(self, isbn: str, review_id: str) -> Tuple[bool, Optional[Error]]:
        _, error = self._request(
            "DELETE",
            f"/subscriber/auth/delete-review-isbn-reviewID/{self._segment(isbn)}/{self._segment(review_id)}",
        )
        return error is None, error
