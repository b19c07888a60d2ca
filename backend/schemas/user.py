from pydantic import BaseModel
from typing import List, Optional
from schemas.common import ORMBase

# Output schema for a stored user
class UserResponse(ORMBase):
    id: int
    email: str
    google_sub: Optional[str] = None
    picture_url: Optional[str] = None
    full_name: Optional[str] = None
    given_name: Optional[str] = None
    family_name: Optional[str] = None
    email_verified: bool = False
    locale: Optional[str] = None
    hosted_domain: Optional[str] = None
    admin: bool = False

# Stored user plus the roles granted for this request
class CurrentUserResponse(BaseModel):
    user: Optional[UserResponse] = None
    roles: List[str] = []

# Schema for the CSRF token handed to the frontend
class CsrfToken(BaseModel):
    parameter_name: str = "_csrf"
    header_name: str
    token: str

# Flags the frontend uses to adapt its navigation
class SystemInfo(BaseModel):
    show_swagger_ui_link: bool
    embedded_database: bool
