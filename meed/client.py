"""Client for Medium's RSS feeds and topics directory."""

import time
from typing import Awaitable, Callable, List, Optional, Union

import structlog

from .ingestion.decoders import parse_rss, parse_topics
from .ingestion.errors import ValidationError
from .ingestion.formatters import format_rss, format_topics
from .ingestion.interfaces import BASE_URL, FeedItem, FeedKind, Topic
from .ingestion.response import check_response

logger = structlog.get_logger()

RSS_CONTENT_TYPE = "text/xml"
JSON_CONTENT_TYPE = "application/json"


def _require_name(value, label: str) -> str:
    if not (isinstance(value, str) and value):
        raise ValidationError(f"{label} is required and must be a non-empty string")
    return value


def _release(response) -> None:
    release = getattr(response, "release", None)
    if callable(release):
        release()


class Meed:
    """Fetch Medium feeds as FeedItem and Topic lists.

    Arguments are checked when a method is called; the returned awaitable does
    the request::

        client = Meed(transport, proxy="https://cors.example.com/")
        items = await client.publication("the-story", "writing")

    Args:
        transport: ``transport(url)`` returning an awaitable response with
            ``ok``/``status``, ``headers.get`` and ``async text()``.
        proxy: Optional string prepended verbatim to every URL. ``None``,
            ``False`` and ``""`` mean no proxy.
    """

    def __init__(self, transport: Callable[[str], Awaitable] = None, proxy: Union[str, bool, None] = None):
        if proxy is not None and proxy is not False and not isinstance(proxy, str):
            raise ValidationError("Proxy must be a string")
        self.proxy = proxy or None

        if not callable(transport):
            raise ValidationError("Transport is required and must be callable")
        self.transport = transport

    def _url(self, path: str) -> str:
        url = f"{BASE_URL}{path}"
        if self.proxy:
            return f"{self.proxy}{url}"
        return url

    async def _get_rss(self, url: str, kind: FeedKind) -> List[FeedItem]:
        start_time = time.time()
        logger.debug("feed_requested", kind=kind.value, url=url)

        response = await self.transport(url)
        try:
            text = await check_response(response, RSS_CONTENT_TYPE)
        finally:
            _release(response)
        items = format_rss(parse_rss(text), kind)

        logger.info(
            "feed_fetched",
            kind=kind.value,
            url=url,
            items=len(items),
            time_ms=int((time.time() - start_time) * 1000)
        )
        return items

    async def _get_topics(self, url: str) -> List[Topic]:
        start_time = time.time()
        logger.debug("topics_requested", url=url)

        response = await self.transport(url)
        try:
            text = await check_response(response, JSON_CONTENT_TYPE)
        finally:
            _release(response)
        topics = format_topics(parse_topics(text))

        logger.info(
            "topics_fetched",
            url=url,
            topics=len(topics),
            time_ms=int((time.time() - start_time) * 1000)
        )
        return topics

    def user(self, user: str) -> Awaitable[List[FeedItem]]:
        """Get a user's feed."""
        _require_name(user, "User")
        return self._get_rss(self._url(f"/feed/@{user}"), FeedKind.USER)

    def publication(self, publication: str, tag: Optional[str] = None) -> Awaitable[List[FeedItem]]:
        """Get a publication's feed, optionally narrowed to one tag."""
        _require_name(publication, "Publication")
        path = f"/feed/{publication}"
        if tag is not None:
            _require_name(tag, "Tag")
            path += f"/tagged/{tag}"
        return self._get_rss(self._url(path), FeedKind.PUBLICATION)

    def topic(self, topic: str) -> Awaitable[List[FeedItem]]:
        """Get the feed for a topic (see ``topics()`` for valid slugs)."""
        _require_name(topic, "Topic")
        return self._get_rss(self._url(f"/feed/topic/{topic}"), FeedKind.TOPIC)

    def tag(self, tag: str) -> Awaitable[List[FeedItem]]:
        """Get the feed for a tag."""
        _require_name(tag, "Tag")
        return self._get_rss(self._url(f"/feed/tag/{tag}"), FeedKind.TAG)

    def topics(self) -> Awaitable[List[Topic]]:
        """Get the topics listed on medium.com/topics."""
        return self._get_topics(self._url("/topics?format=json"))
