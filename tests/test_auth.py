"""Tests for login, the session cookie and the auth gate."""

import pytest

from book_catalog_api.app.core.config import settings
from book_catalog_api.app.core.security import create_access_token
from tests.conftest import PASSWORD, USERNAME, add_book


PROTECTED = [
    ("post", "/subscriber/auth/add-book", {"isbn": "1", "author": "A", "title": "T"}),
    ("put", "/subscriber/auth/add-review-isbn/1", {"review": "x"}),
    ("delete", "/subscriber/auth/delete-book-isbn/1", None),
    ("delete", "/subscriber/auth/delete-review-isbn/1", None),
    ("delete", "/subscriber/auth/delete-review-isbn-reviewID/1/abc", None),
]


def _call(client, method, path, body):
    if body is None:
        return getattr(client, method)(path)
    return getattr(client, method)(path, json=body)


@pytest.fixture
def registered(client):
    client.post("/register", json={"username": USERNAME, "password": PASSWORD})
    return client


def test_login_success(registered):
    resp = registered.post("/subscriber/login", json={"username": USERNAME, "password": PASSWORD})
    assert resp.status_code == 200
    assert resp.json() == {"message": f"Welcome {USERNAME}, you are logged in."}
    assert settings.session_cookie_name in resp.cookies


def test_login_does_not_expose_token_in_body(registered):
    resp = registered.post("/subscriber/login", json={"username": USERNAME, "password": PASSWORD})
    token = resp.cookies[settings.session_cookie_name]
    assert token not in resp.text
    assert "httponly" in resp.headers["set-cookie"].lower()


def test_login_wrong_password_is_401(registered):
    resp = registered.post("/subscriber/login", json={"username": USERNAME, "password": "wrong"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Invalid login details. Check your username and password."
    assert settings.session_cookie_name not in resp.cookies


def test_login_unknown_user_is_401(client):
    resp = client.post("/subscriber/login", json={"username": "ghost", "password": "x"})
    assert resp.status_code == 401


def test_login_missing_fields_is_400(client):
    assert client.post("/subscriber/login", json={"username": USERNAME}).status_code == 400


def test_login_establishes_usable_session(registered, sample_book):
    registered.post("/subscriber/login", json={"username": USERNAME, "password": PASSWORD})
    assert add_book(registered, **sample_book).status_code == 201


def test_relogin_replaces_session(registered, sample_book):
    registered.post("/register", json={"username": "second", "password": "pw2"})
    registered.post("/subscriber/login", json={"username": USERNAME, "password": PASSWORD})
    resp = registered.post("/subscriber/login", json={"username": "second", "password": "pw2"})
    assert resp.status_code == 200
    assert add_book(registered, **sample_book).status_code == 201


@pytest.mark.parametrize("method,path,body", PROTECTED)
def test_protected_routes_without_session_are_403(client, method, path, body):
    resp = _call(client, method, path, body)
    assert resp.status_code == 403
    assert resp.json() == {"message": "User not logged in."}


@pytest.mark.parametrize("method,path,body", PROTECTED)
def test_protected_routes_with_bad_token_are_403(client, method, path, body):
    client.cookies.set(settings.session_cookie_name, "not.a.token")
    resp = _call(client, method, path, body)
    assert resp.status_code == 403
    assert resp.json() == {"message": "User not authenticated"}


def test_expired_token_is_403(client, sample_book):
    client.cookies.set(settings.session_cookie_name, create_access_token({"sub": USERNAME}, expires_delta=-10))
    assert add_book(client, **sample_book).status_code == 403


def test_tampered_token_is_403(client, sample_book):
    token = create_access_token({"sub": USERNAME})
    header, _, signature = token.split(".")
    forged = create_access_token({"sub": "admin"}).split(".")[1]
    client.cookies.set(settings.session_cookie_name, f"{header}.{forged}.{signature}")
    assert add_book(client, **sample_book).status_code == 403


def test_valid_token_without_login_is_accepted(client, sample_book):
    client.cookies.set(settings.session_cookie_name, create_access_token({"sub": USERNAME}))
    assert add_book(client, **sample_book).status_code == 201


def test_login_route_is_not_gated(client):
    # Bad credentials, not a missing session.
    assert client.post("/subscriber/login", json={"username": "x", "password": "y"}).status_code == 401


def test_logout_ends_session(registered, sample_book):
    registered.post("/subscriber/login", json={"username": USERNAME, "password": PASSWORD})
    resp = registered.post("/subscriber/logout")
    assert resp.status_code == 200
    assert add_book(registered, **sample_book).status_code == 403


def test_guest_routes_need_no_session(client):
    assert client.get("/isbn/1").status_code == 404
