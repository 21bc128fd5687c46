"""aiohttp-backed transport for the Meed client."""

from typing import Optional

import aiohttp
import structlog

from .interfaces import TransportInterface
from ..config.settings import settings

logger = structlog.get_logger()


class AiohttpTransport(TransportInterface):
    """Async HTTP GET over a shared aiohttp session.

    Use as an async context manager; the session lives for the duration of
    the ``async with`` block::

        async with AiohttpTransport() as transport:
            items = await Meed(transport).user("alice")
    """

    def __init__(self, timeout_seconds: Optional[float] = None, user_agent: Optional[str] = None):
        self.session: Optional[aiohttp.ClientSession] = None
        self.timeout_seconds = timeout_seconds or settings.fetch_timeout_seconds
        self.user_agent = user_agent or settings.user_agent

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
            headers={"User-Agent": self.user_agent}
        )
        return self

    async def __aexit__(self, *args):
        if self.session:
            await self.session.close()
            self.session = None

    async def __call__(self, url: str) -> aiohttp.ClientResponse:
        if self.session is None:
            raise RuntimeError("AiohttpTransport must be used inside 'async with'")
        logger.debug("http_get", url=url)
        async with self.session.get(url) as response:
            # Read inside the context; the cached body still serves text()
            await response.read()
        return response
