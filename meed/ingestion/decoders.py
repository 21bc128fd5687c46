"""Decoding of raw response bodies."""

import io
import json

import feedparser
import structlog

from .errors import ParseError

logger = structlog.get_logger()

# Medium prefixes JSON with ])}while(1);</x> so it can't be loaded via <script>
GUARD_PREFIX = "])}while(1);</x>"
GUARD_OFFSET = len(GUARD_PREFIX)


def parse_rss(text: str) -> feedparser.FeedParserDict:
    """Parse an RSS document with feedparser.

    feedparser flags broken documents with ``bozo`` instead of raising. A
    flagged document it could still identify as a feed is kept; one it could
    not identify as any feed format raises ParseError.
    """
    # A stream, so the body is never taken for a URL or a filename.
    feed = feedparser.parse(
        io.BytesIO(text.encode("utf-8")), sanitize_html=False, resolve_relative_uris=False
    )
    exc = feed.get("bozo_exception")

    if not feed.get("version"):
        raise ParseError(f"Invalid RSS: {exc or 'unrecognized feed format'}") from exc

    if feed.get("bozo"):
        logger.warning("rss_recovered", error=str(exc), entries=len(feed.entries))

    return feed


def parse_topics(text: str, offset: int = GUARD_OFFSET) -> dict:
    """Strip the JSON guard prefix and parse what's left."""
    try:
        return json.loads(text[offset:])
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e}") from e
