# backend/services/current_user.py
import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Set

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import settings
from models.users import User
from repositories.users import UserRepository

logger = logging.getLogger(__name__)

ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"


@dataclass
class CurrentUser:
    user: Optional[User] = None
    roles: Set[str] = field(default_factory=set)

    def is_logged_in(self) -> bool:
        return self.user is not None

    def has_role(self, role: str) -> bool:
        return role in self.roles


# Map the provider userinfo response onto session token claims
def claims_from_userinfo(userinfo: dict) -> dict:
    email = (userinfo.get("email") or "").strip().lower()
    return {
        "sub": email,
        "email": email,
        "google_sub": userinfo.get("sub"),
        "picture": userinfo.get("picture"),
        "name": userinfo.get("name"),
        "given_name": userinfo.get("given_name"),
        "family_name": userinfo.get("family_name"),
        "email_verified": bool(userinfo.get("email_verified", False)),
        "locale": userinfo.get("locale"),
        "hd": userinfo.get("hd"),
    }


# Resolves the caller of one request; missing claims mean the anonymous user
class CurrentUserService:

    def __init__(self, db: Session, claims: Optional[dict], admin_emails: Optional[Iterable[str]] = None):
        self.users = UserRepository(db)
        self.claims = claims or {}
        if admin_emails is None:
            admin_emails = settings.admin_emails
        self.admin_emails = {e.strip().lower() for e in admin_emails}
        self._current: Optional[CurrentUser] = None

    def is_logged_in(self) -> bool:
        return bool(self.claims.get("email"))

    def get_current_user(self) -> CurrentUser:
        if self._current is None:
            if not self.is_logged_in():
                self._current = CurrentUser()
            else:
                user = self._get_or_create_user()
                self._current = CurrentUser(user=user, roles=self._roles_for(user))
        return self._current

    def get_user(self) -> Optional[User]:
        return self.get_current_user().user

    def get_roles(self) -> Set[str]:
        return self.get_current_user().roles

    # Allow-listed e-mail or stored admin flag
    def is_admin_email(self, email: str) -> bool:
        email = email.strip().lower()
        if email in self.admin_emails:
            return True
        user = self.users.find_by_email(email)
        return bool(user and user.admin)

    def _roles_for(self, user: User) -> Set[str]:
        roles = {ROLE_USER}
        if user.email in self.admin_emails or user.admin:
            roles.add(ROLE_ADMIN)
        return roles

    def _get_or_create_user(self) -> User:
        email = self.claims["email"].strip().lower()
        user = self.users.find_by_email(email)
        if user is not None:
            return user

        user = User(
            email=email,
            google_sub=self.claims.get("google_sub"),
            picture_url=self.claims.get("picture"),
            full_name=self.claims.get("name"),
            given_name=self.claims.get("given_name"),
            family_name=self.claims.get("family_name"),
            email_verified=bool(self.claims.get("email_verified", False)),
            locale=self.claims.get("locale"),
            hosted_domain=self.claims.get("hd"),
            admin=email in self.admin_emails,
        )
        try:
            user = self.users.save(user)
        except IntegrityError:
            # Another request created the same e-mail first
            self.users.db.rollback()
            logger.info("User %s was created concurrently, reusing stored row", email)
            return self.users.find_by_email(email)
        logger.info("Created user %s (id=%s, admin=%s)", user.email, user.id, user.admin)
        return user
