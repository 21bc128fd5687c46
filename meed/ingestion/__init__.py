"""Fetching, decoding and formatting Medium feeds."""

from .interfaces import (
    BASE_URL, CDN_URL, FeedKind, FeedItem, Topic,
    ResponseInterface, TransportInterface
)
from .errors import MeedError, ValidationError, UpstreamError, ParseError
from .response import check_response
from .decoders import parse_rss, parse_topics
from .formatters import CONTENT_FIELDS, ContentField, format_rss, format_topics
from .transport import AiohttpTransport

__all__ = [
    "BASE_URL", "CDN_URL", "FeedKind", "FeedItem", "Topic",
    "ResponseInterface", "TransportInterface",
    "MeedError", "ValidationError", "UpstreamError", "ParseError",
    "check_response", "parse_rss", "parse_topics",
    "CONTENT_FIELDS", "ContentField", "format_rss", "format_topics",
    "AiohttpTransport",
]
