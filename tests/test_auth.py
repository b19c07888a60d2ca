"""
Tests for OAuth2 login, the session cookie, logout and CSRF protection.

The identity provider is never contacted: the OAuth client's HTTP calls
are replaced with AsyncMocks.
"""

from datetime import timedelta
from unittest.mock import AsyncMock
from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from conftest import ADMIN_EMAIL, make_token
from config import settings
from utils.csrf import CSRF_COOKIE_NAME, CSRF_HEADER_NAME
from utils.oauth_client import oauth_client
from utils.tokenJWT import create_access_token, decode_access_token

USERINFO = {
    "sub": "1157",
    "email": "chris@ucsb.edu",
    "email_verified": True,
    "name": "Chris Gaucho",
    "given_name": "Chris",
    "family_name": "Gaucho",
    "picture": "https://example.org/p.png",
    "locale": "en",
    "hd": "ucsb.edu",
}


@pytest.fixture
def provider(monkeypatch):
    """Fake identity provider answering the code exchange and userinfo calls."""
    exchange = AsyncMock(return_value={"access_token": "provider-token"})
    userinfo = AsyncMock(return_value=dict(USERINFO))
    monkeypatch.setattr(oauth_client, "exchange_code", exchange)
    monkeypatch.setattr(oauth_client, "fetch_userinfo", userinfo)
    return exchange, userinfo


def _start_login(client):
    response = client.get("/oauth2/authorization/google", follow_redirects=False)
    state = parse_qs(urlparse(response.headers["location"]).query)["state"][0]
    return response, state


class TestTokens:
    def test_round_trip(self):
        claims = decode_access_token(create_access_token({"sub": "a@ucsb.edu", "email": "a@ucsb.edu"}))
        assert claims["email"] == "a@ucsb.edu"
        assert "exp" in claims

    def test_expired_token_is_rejected(self):
        token = create_access_token({"email": "a@ucsb.edu"}, expires_delta=timedelta(minutes=-1))
        assert decode_access_token(token) is None

    def test_token_without_email_is_rejected(self):
        assert decode_access_token(create_access_token({"sub": "123"})) is None

    def test_expired_token_means_logged_out(self, client):
        token = create_access_token({"email": "a@ucsb.edu"}, expires_delta=timedelta(minutes=-1))
        response = client.get("/api/currentUser", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 403


class TestLogin:
    def test_login_redirects_to_provider_with_state_cookie(self, client):
        response, state = _start_login(client)

        assert response.status_code == 302
        location = urlparse(response.headers["location"])
        query = parse_qs(location.query)
        assert f"{location.scheme}://{location.netloc}{location.path}" == settings.OAUTH_AUTHORIZE_URL
        assert query["response_type"] == ["code"]
        assert query["redirect_uri"] == [settings.redirect_uri]
        assert query["scope"] == [settings.OAUTH_SCOPE]
        assert client.cookies.get("OAUTH2_STATE") == state

    def test_callback_creates_user_and_opens_session(self, client, provider):
        exchange, userinfo = provider
        _, state = _start_login(client)

        response = client.get(
            "/login/oauth2/code/google",
            params={"code": "auth-code", "state": state},
            follow_redirects=False,
        )

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        exchange.assert_awaited_once_with("auth-code")
        userinfo.assert_awaited_once_with("provider-token")

        # The session cookie alone now authenticates the browser
        current = client.get("/api/currentUser")
        assert current.status_code == 200
        assert current.json()["user"]["email"] == "chris@ucsb.edu"
        assert current.json()["user"]["google_sub"] == "1157"
        assert current.json()["roles"] == ["ROLE_USER"]

    def test_callback_with_wrong_state_is_rejected(self, client, provider):
        _start_login(client)

        response = client.get(
            "/login/oauth2/code/google",
            params={"code": "auth-code", "state": "forged"},
            follow_redirects=False,
        )

        assert response.status_code == 401
        provider[0].assert_not_awaited()

    def test_callback_without_state_cookie_is_rejected(self, client, provider):
        response = client.get(
            "/login/oauth2/code/google",
            params={"code": "auth-code", "state": "anything"},
            follow_redirects=False,
        )
        assert response.status_code == 401

    def test_provider_error_is_unauthorized(self, client):
        response = client.get("/login/oauth2/code/google", params={"error": "access_denied"})
        assert response.status_code == 401

    def test_provider_failure_is_unauthorized(self, client, monkeypatch):
        request = httpx.Request("POST", settings.OAUTH_TOKEN_URL)
        failing = AsyncMock(side_effect=httpx.ConnectError("down", request=request))
        monkeypatch.setattr(oauth_client, "exchange_code", failing)
        _, state = _start_login(client)

        response = client.get(
            "/login/oauth2/code/google",
            params={"code": "auth-code", "state": state},
            follow_redirects=False,
        )

        assert response.status_code == 401

    def test_userinfo_without_email_is_unauthorized(self, client, provider):
        provider[1].return_value = {"sub": "1157"}
        _, state = _start_login(client)

        response = client.get(
            "/login/oauth2/code/google",
            params={"code": "auth-code", "state": state},
            follow_redirects=False,
        )

        assert response.status_code == 401


class TestCsrf:
    def test_csrf_endpoint_issues_token_and_cookie(self, client):
        response = client.get("/csrf")

        assert response.status_code == 200
        data = response.json()
        assert data["header_name"] == CSRF_HEADER_NAME
        assert data["parameter_name"] == "_csrf"
        assert client.cookies.get(CSRF_COOKIE_NAME) == data["token"]

    def test_csrf_token_is_stable_while_cookie_exists(self, client):
        first = client.get("/csrf").json()["token"]
        second = client.get("/csrf").json()["token"]
        assert first == second

    def test_cookie_session_post_without_csrf_header_is_forbidden(self, client):
        client.cookies.set(settings.SESSION_COOKIE_NAME, make_token(ADMIN_EMAIL))

        response = client.post(
            "/api/groceries/post", params={"name": "Banana", "price": "0.29", "expiration": "05-17-23"}
        )

        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid CSRF token"

    def test_cookie_session_post_with_csrf_header_succeeds(self, client):
        client.cookies.set(settings.SESSION_COOKIE_NAME, make_token(ADMIN_EMAIL))
        token = client.get("/csrf").json()["token"]

        response = client.post(
            "/api/groceries/post",
            params={"name": "Banana", "price": "0.29", "expiration": "05-17-23"},
            headers={CSRF_HEADER_NAME: token},
        )

        assert response.status_code == 200

    def test_cookie_session_get_needs_no_csrf_header(self, client):
        client.cookies.set(settings.SESSION_COOKIE_NAME, make_token(ADMIN_EMAIL))
        assert client.get("/api/groceries/all").status_code == 200


class TestLogout:
    def test_logout_clears_session_cookie(self, client):
        client.cookies.set(settings.SESSION_COOKIE_NAME, make_token(ADMIN_EMAIL))
        token = client.get("/csrf").json()["token"]

        response = client.post("/logout", headers={CSRF_HEADER_NAME: token})

        assert response.status_code == 200
        assert response.json() == {"message": "Logged out"}
        set_cookie = response.headers["set-cookie"]
        assert set_cookie.startswith(f"{settings.SESSION_COOKIE_NAME}=")
        assert "Max-Age=0" in set_cookie
