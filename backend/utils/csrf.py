# backend/utils/csrf.py
import secrets

from fastapi import HTTPException, Request, status

from config import settings

CSRF_COOKIE_NAME = "XSRF-TOKEN"
CSRF_HEADER_NAME = "X-XSRF-TOKEN"
SAFE_METHODS = {"GET", "HEAD", "OPTIONS", "TRACE"}


def new_csrf_token() -> str:
    return secrets.token_urlsafe(32)


def verify_csrf(request: Request) -> None:
    """Double-submit check for state-changing requests authenticated by the session cookie.

    Bearer-token clients never send the session cookie implicitly, so they are not subject to it.
    """
    if request.method in SAFE_METHODS:
        return
    if request.headers.get("authorization", "").lower().startswith("bearer "):
        return
    if settings.SESSION_COOKIE_NAME not in request.cookies:
        return

    cookie_token = request.cookies.get(CSRF_COOKIE_NAME)
    header_token = request.headers.get(CSRF_HEADER_NAME)
    if not cookie_token or not header_token or not secrets.compare_digest(cookie_token, header_token):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid CSRF token")
