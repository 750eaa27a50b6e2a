"""Shared fixtures for the catalog tests.

Every test gets a fresh application with empty stores, so state never
leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from book_catalog_api.app.main import create_app


USERNAME = "reader"
PASSWORD = "s3cret-pass"


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    """A test client with no session."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def subscriber(client):
    """The same client, registered and logged in."""
    assert client.post("/register", json={"username": USERNAME, "password": PASSWORD}).status_code == 201
    assert client.post("/subscriber/login", json={"username": USERNAME, "password": PASSWORD}).status_code == 200
    return client


@pytest.fixture
def sample_book():
    return {"isbn": "123", "author": "A", "title": "T"}


def add_book(client, **book):
    return client.post("/subscriber/auth/add-book", json=book)


def add_review(client, isbn, text):
    return client.put(f"/subscriber/auth/add-review-isbn/{isbn}", json={"review": text})
