# utils/tokenJWT.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import jwt, JWTError
from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyCookie, HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session

from config import settings
from database import get_db
from services.current_user import CurrentUser, CurrentUserService, ROLE_ADMIN, ROLE_USER

logger = logging.getLogger(__name__)

# The session token travels either in the session cookie (browser) or as a bearer header (API clients)
bearer_scheme = HTTPBearer(auto_error=False)
cookie_scheme = APIKeyCookie(name=settings.SESSION_COOKIE_NAME, auto_error=False)

# Generate a new session token from identity claims
def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

# Decode a session token; any invalid token means "not authenticated"
def decode_access_token(token: str) -> Optional[dict]:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.debug("Rejected session token: %s", e)
        return None
    if not payload.get("email"):
        return None
    return payload

# Extract identity claims from the request, if any
def get_token_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    cookie_token: Optional[str] = Depends(cookie_scheme),
) -> Optional[dict]:
    token = credentials.credentials if credentials else cookie_token
    if not token:
        return None
    return decode_access_token(token)

# Resolve the current user for this request; anonymous when no valid token is present
def get_current_user(
    claims: Optional[dict] = Depends(get_token_claims),
    db: Session = Depends(get_db),
) -> CurrentUser:
    return CurrentUserService(db, claims).get_current_user()

# Dependency factory for Role-Based Access Control
def role_required(*allowed_roles):
    def _checker(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
        # Anonymous callers are refused the same way as callers lacking the role
        if not current_user.is_logged_in():
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        if allowed_roles and not current_user.roles.intersection(allowed_roles):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
        return current_user
    return _checker

require_user = role_required(ROLE_USER)
require_admin = role_required(ROLE_ADMIN)
