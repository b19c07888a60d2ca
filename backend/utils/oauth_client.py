# backend/utils/oauth_client.py
import httpx
import logging
from urllib.parse import urlencode
from config import settings

logger = logging.getLogger(__name__)

class OAuthClient:
    """Authorization-code flow against the configured OpenID Connect provider."""

    def __init__(self):
        self.client_id = settings.GOOGLE_CLIENT_ID
        self.client_secret = settings.GOOGLE_CLIENT_SECRET
        self.authorize_url = settings.OAUTH_AUTHORIZE_URL
        self.token_url = settings.OAUTH_TOKEN_URL
        self.userinfo_url = settings.OAUTH_USERINFO_URL
        self.scope = settings.OAUTH_SCOPE
        self.redirect_uri = settings.redirect_uri

    def authorization_url(self, state: str) -> str:
        # URL the browser is sent to in order to log in at the provider
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": self.scope,
            "state": state,
            "prompt": "select_account",
        }
        return f"{self.authorize_url}?{urlencode(params)}"

    async def exchange_code(self, code: str) -> dict:
        # Trade the authorization code for provider tokens
        payload = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": self.redirect_uri,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }
        async with httpx.AsyncClient() as client:
            try:
                response = await client.post(self.token_url, data=payload, headers={"Accept": "application/json"})
                response.raise_for_status()
                return response.json()
            except (httpx.RequestError, httpx.HTTPStatusError) as e:
                logger.error(f"OAuth token exchange error: {e}")
                raise

    async def fetch_userinfo(self, access_token: str) -> dict:
        # Identity attributes (sub, email, name, picture, hd, ...) of the logged in user
        headers = {"Authorization": f"Bearer {access_token}"}
        async with httpx.AsyncClient() as client:
            try:
                response = await client.get(self.userinfo_url, headers=headers)
                response.raise_for_status()
                return response.json()
            except (httpx.RequestError, httpx.HTTPStatusError) as e:
                logger.error(f"OAuth userinfo error: {e}")
                raise

oauth_client = OAuthClient()
