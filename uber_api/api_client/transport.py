import asyncio
import logging
from abc import ABC
from abc import abstractmethod

import aiohttp
from aiohttp import ClientSession
from aiohttp import ClientTimeout

from .exceptions import TransportError
from .response import Request
from .response import Response

__all__ = ["AiohttpTransport", "Transport"]


logger = logging.getLogger(__name__)


class Transport(ABC):
    """Performs a single HTTP request / response exchange.

    Implementations raise on network failures only; any HTTP status is returned
    as a Response.
    """

    async def connect(self) -> None:
        pass

    async def disconnect(self) -> None:
        pass

    @abstractmethod
    async def send(self, request: Request) -> Response:
        pass


class AiohttpTransport(Transport):
    """Transport using an aiohttp ClientSession.

    Call ``connect()`` to reuse one session (and its connection pool) for all
    requests; without it, every request runs in its own session.
    """

    def __init__(self):
        self._session: ClientSession | None = None

    async def connect(self) -> None:
        if self._session is None:
            self._session = ClientSession()

    async def disconnect(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def send(self, request: Request) -> Response:
        try:
            if self._session is None:
                async with ClientSession() as session:
                    return await self._send(session, request)
            return await self._send(self._session, request)
        except (aiohttp.ClientError, asyncio.exceptions.TimeoutError) as e:
            logger.warning("%s %s failed: %r", request.method, request.url, e)
            raise TransportError(f"{request.method} {request.url}: {e!r}") from e

    @staticmethod
    async def _send(session: ClientSession, request: Request) -> Response:
        response = await session.request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            data=request.body,
            timeout=ClientTimeout(total=request.timeout),
        )
        data = await response.read()
        return Response(
            status=response.status,
            data=data,
            content_type=response.headers.get("Content-Type"),
            reason=response.reason or "",
        )
