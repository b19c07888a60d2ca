# backend/routes/auth.py
import logging
import secrets
from typing import Optional

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from schemas.common import GenericMessage
from schemas.user import CsrfToken
from services.current_user import CurrentUserService, claims_from_userinfo
from utils.csrf import CSRF_COOKIE_NAME, CSRF_HEADER_NAME, new_csrf_token
from utils.errors import generic_message
from utils.oauth_client import oauth_client
from utils.tokenJWT import create_access_token

router = APIRouter(tags=["Auth"])
logger = logging.getLogger(__name__)

STATE_COOKIE_NAME = "OAUTH2_STATE"
STATE_MAX_AGE = 10 * 60


# Start the OAuth2 login: send the browser to the identity provider
@router.get("/oauth2/authorization/google")
def login():
    state = secrets.token_urlsafe(24)
    response = RedirectResponse(oauth_client.authorization_url(state), status_code=status.HTTP_302_FOUND)
    response.set_cookie(STATE_COOKIE_NAME, state, max_age=STATE_MAX_AGE, httponly=True, samesite="lax")
    return response


# Provider callback: verify state, fetch identity, open the session
@router.get("/login/oauth2/code/google")
async def login_callback(
    request: Request,
    code: Optional[str] = None,
    state: Optional[str] = None,
    error: Optional[str] = None,
    db: Session = Depends(get_db),
):
    if error:
        logger.warning("OAuth2 provider returned error: %s", error)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=f"Login failed: {error}")

    expected_state = request.cookies.get(STATE_COOKIE_NAME)
    if not code or not state or not expected_state or not secrets.compare_digest(state, expected_state):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid OAuth2 state")

    try:
        tokens = await oauth_client.exchange_code(code)
        userinfo = await oauth_client.fetch_userinfo(tokens["access_token"])
    except (httpx.HTTPError, KeyError) as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Login failed") from e

    claims = claims_from_userinfo(userinfo)
    if not claims["email"]:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Identity provider returned no e-mail")

    # Creates the stored user on first login
    current_user = CurrentUserService(db, claims).get_current_user()
    logger.info("User %s logged in with roles %s", current_user.user.email, sorted(current_user.roles))

    response = RedirectResponse("/", status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        settings.SESSION_COOKIE_NAME,
        create_access_token(claims),
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    response.delete_cookie(STATE_COOKIE_NAME)
    return response


# End the session
@router.post("/logout", response_model=GenericMessage)
def logout(response: Response):
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return generic_message("Logged out")


# Hand the frontend a CSRF token, reusing the one already in the cookie
@router.get("/csrf", response_model=CsrfToken)
def csrf(request: Request, response: Response):
    token = request.cookies.get(CSRF_COOKIE_NAME) or new_csrf_token()
    # Readable by the frontend's JavaScript, which echoes it back in the header
    response.set_cookie(CSRF_COOKIE_NAME, token, httponly=False, samesite="lax")
    return CsrfToken(header_name=CSRF_HEADER_NAME, token=token)
