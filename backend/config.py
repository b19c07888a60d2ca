# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, List, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    SECRET_KEY: str = "dev-secret-change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    DATABASE_URL: str = "sqlite:///./database_campusapp.db"

    # Comma separated list of e-mails that always get ROLE_ADMIN
    ADMIN_EMAILS: str = ""

    # OAuth2 identity provider (Google OpenID Connect by default)
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""
    OAUTH_AUTHORIZE_URL: str = "https://accounts.google.com/o/oauth2/v2/auth"
    OAUTH_TOKEN_URL: str = "https://oauth2.googleapis.com/token"
    OAUTH_USERINFO_URL: str = "https://openidconnect.googleapis.com/v1/userinfo"
    OAUTH_SCOPE: str = "openid email profile"

    # Public backend URL used to build the OAuth redirect URI
    BACKEND_URL: str = "http://localhost:8080"

    SESSION_COOKIE_NAME: str = "SESSION"
    SESSION_COOKIE_SECURE: bool = False

    # Development: forward unmatched paths to the frontend dev server
    FRONTEND_PROXY_URL: Optional[str] = None
    # Production: serve the built single page app from this directory
    FRONTEND_BUILD_DIR: str = str(Path(__file__).parent.parent / "frontend" / "build")

    SHOW_SWAGGER_UI_LINK: bool = True
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

    @property
    def admin_emails(self) -> List[str]:
        return [e.strip().lower() for e in self.ADMIN_EMAILS.split(",") if e.strip()]

    @property
    def database_url(self) -> str:
        # SQLAlchemy requires postgresql:// instead of the legacy postgres:// scheme
        url = self.DATABASE_URL
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)
        return url

    @property
    def redirect_uri(self) -> str:
        return self.BACKEND_URL.rstrip("/") + "/login/oauth2/code/google"

settings = Settings()
