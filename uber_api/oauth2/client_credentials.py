import logging
import time

from async_lru import alru_cache
from pydantic import AnyHttpUrl
from pydantic import BaseModel

from uber_api.api_client import ApiProvider
from uber_api.api_client import Transport

from .token_transport import TokenTransport

__all__ = ["AccessToken", "CCTokenGateway", "OAuth2CCSettings"]


logger = logging.getLogger(__name__)


class OAuth2CCSettings(BaseModel):
    token_url: AnyHttpUrl = AnyHttpUrl("https://login.uber.com/oauth/v2/token")
    client_id: str
    client_secret: str
    scope: str = "eats.deliveries"
    timeout: float = 1.0  # in seconds
    leeway: int = 5 * 60  # in seconds


class AccessToken(BaseModel):
    access_token: str
    expires_at: float  # unix timestamp

    def is_usable(self, leeway: int) -> bool:
        """Determine whether the token has not expired (and will not soon)"""
        return self.expires_at - leeway >= time.time()


class CCTokenGateway:
    """Fetches and caches access tokens using the client credentials grant"""

    def __init__(self, settings: OAuth2CCSettings, transport: Transport):
        self.settings = settings
        self.provider = ApiProvider(
            url=settings.token_url, transport=transport, timeout=settings.timeout
        )
        # This binds the cache to the CCTokenGateway instance (and not the class)
        self.cached_fetch_token = alru_cache(self._fetch_token)

    async def _fetch_token(self) -> AccessToken:
        response = await self.provider.request(
            method="POST",
            path="",
            fields={
                "client_id": self.settings.client_id,
                "client_secret": self.settings.client_secret,
                "grant_type": "client_credentials",
                "scope": self.settings.scope,
            },
        )
        assert response is not None
        logger.debug("fetched a new access token for scope '%s'", self.settings.scope)
        return AccessToken(
            access_token=response["access_token"],
            expires_at=time.time() + response.get("expires_in", 0),
        )

    async def fetch_token(self) -> str:
        token = await self.cached_fetch_token()
        if not token.is_usable(self.settings.leeway):
            self.cached_fetch_token.cache_clear()
            token = await self.cached_fetch_token()
        return token.access_token

    async def fetch_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {await self.fetch_token()}"}

    def authorize(self, base: Transport) -> TokenTransport:
        """A transport that authorizes requests with tokens from this gateway"""
        return TokenTransport(base, self.fetch_headers)
