"""Interface definitions for feed retrieval."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List


BASE_URL = "https://medium.com"
CDN_URL = "https://cdn-images-1.medium.com"


class FeedKind(Enum):
    """The kinds of RSS feed Medium serves."""
    USER = "user"
    PUBLICATION = "publication"
    TOPIC = "topic"
    TAG = "tag"


@dataclass(frozen=True)
class FeedItem:
    """A single post from an RSS feed."""
    date: datetime
    link: str               # Query string (?source=rss...) removed
    guid: str = ""          # Permalink or short URI
    title: str = ""
    author: str = ""        # From <dc:creator>
    content: str = ""       # HTML
    categories: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": self.date.isoformat() if self.date else None,
            "link": self.link,
            "guid": self.guid,
            "title": self.title,
            "author": self.author,
            "content": self.content,
            "categories": list(self.categories),
        }


@dataclass(frozen=True)
class Topic:
    """An entry from the medium.com/topics directory."""
    slug: str
    link: str
    name: str = ""
    image: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "slug": self.slug,
            "link": self.link,
            "name": self.name,
            "image": self.image,
            "description": self.description,
        }


class ResponseInterface:
    """What a transport must hand back.

    ``aiohttp.ClientResponse`` fits: ``ok``/``status``, a case-insensitive
    ``headers.get`` and an awaitable ``text()``.
    """

    ok: bool
    status: int

    async def text(self) -> str:
        """Read the response body."""
        raise NotImplementedError


class TransportInterface:
    """Interface for the HTTP GET capability the client is given."""

    async def __call__(self, url: str) -> ResponseInterface:
        """Fetch ``url`` and return the response."""
        raise NotImplementedError
