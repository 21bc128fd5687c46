"""meed - Medium feeds as structured records."""

from .client import Meed
from .ingestion import (
    FeedKind, FeedItem, Topic,
    MeedError, ValidationError, UpstreamError, ParseError,
    AiohttpTransport, TransportInterface
)
from .version import __version__

__all__ = [
    "Meed", "FeedKind", "FeedItem", "Topic",
    "MeedError", "ValidationError", "UpstreamError", "ParseError",
    "AiohttpTransport", "TransportInterface",
]
