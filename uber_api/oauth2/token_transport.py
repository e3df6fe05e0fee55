from collections.abc import Awaitable
from collections.abc import Callable

from uber_api.api_client import Request
from uber_api.api_client import Response
from uber_api.api_client import Transport

__all__ = ["TokenTransport"]


class TokenTransport(Transport):
    """Wraps a transport and authorizes every request it sends.

    The headers returned by ``headers_factory`` take precedence over headers that
    are already on the request.
    """

    def __init__(
        self,
        base: Transport,
        headers_factory: Callable[[], Awaitable[dict[str, str]]],
    ):
        self.base = base
        self._headers_factory = headers_factory

    @classmethod
    def with_token(cls, base: Transport, access_token: str) -> "TokenTransport":
        headers = {"Authorization": f"Bearer {access_token}"}

        async def headers_factory() -> dict[str, str]:
            return headers

        return cls(base, headers_factory)

    async def connect(self) -> None:
        await self.base.connect()

    async def disconnect(self) -> None:
        await self.base.disconnect()

    async def send(self, request: Request) -> Response:
        headers = {**request.headers, **(await self._headers_factory())}
        return await self.base.send(request.update(headers=headers))
