"""Normalize decoded payloads into FeedItem and Topic records."""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

import structlog

from .errors import ValidationError
from .interfaces import BASE_URL, CDN_URL, FeedItem, FeedKind, Topic

logger = structlog.get_logger()


class ContentField(Enum):
    """Where an RSS item keeps its body."""
    ENCODED = "content:encoded"
    DESCRIPTION = "description"


# Medium puts the full post in <content:encoded> for user and publication
# feeds, but in <description> for topic and tag feeds.
CONTENT_FIELDS = {
    FeedKind.USER: ContentField.ENCODED,
    FeedKind.PUBLICATION: ContentField.ENCODED,
    FeedKind.TOPIC: ContentField.DESCRIPTION,
    FeedKind.TAG: ContentField.DESCRIPTION,
}


def _content(entry, source: ContentField) -> str:
    if source is ContentField.ENCODED:
        content = entry.get("content")
        if content:
            return content[0].get("value", "")
        return ""
    return entry.get("summary", "")


def _author(entry) -> str:
    # <dc:creator> holds the name; <author> is "email (name)". Prefer the
    # parsed name so the email never leaks through.
    detail = entry.get("author_detail") or {}
    return detail.get("name") or entry.get("author", "")


def _published(entry) -> Optional[datetime]:
    for attr in ("published_parsed", "updated_parsed"):
        parsed = entry.get(attr)
        if parsed:
            try:
                return datetime(*parsed[:6], tzinfo=timezone.utc)
            except (TypeError, ValueError):
                pass
    return None


def format_entry(entry, kind: FeedKind) -> Optional[FeedItem]:
    """Turn one feedparser entry into a FeedItem, or None if unusable."""
    link = entry.get("link")
    date = _published(entry)
    if not link or date is None:
        logger.warning(
            "feed_item_skipped",
            kind=kind.value,
            link=link,
            reason="missing link" if not link else "missing date",
        )
        return None

    return FeedItem(
        date=date,
        link=link.split("?")[0],
        guid=entry.get("id", ""),
        title=entry.get("title", ""),
        author=_author(entry),
        content=_content(entry, CONTENT_FIELDS[kind]),
        categories=[tag.get("term") for tag in entry.get("tags") or [] if tag.get("term")],
    )


def format_rss(feed, kind: FeedKind) -> List[FeedItem]:
    """Format a parsed RSS feed as a list of FeedItem."""
    items = []
    for entry in feed.entries:
        item = format_entry(entry, kind)
        if item:
            items.append(item)
    return items


def format_topics(data: dict) -> List[Topic]:
    """Format the medium.com/topics JSON as a list of Topic."""
    try:
        refs = data["payload"]["references"]["Topic"] if data.get("success") else None
    except (KeyError, TypeError, AttributeError):
        refs = None

    if not isinstance(refs, dict) or not all(isinstance(t, dict) for t in refs.values()):
        raise ValidationError("Invalid topics JSON")

    topics = []
    for topic in refs.values():
        slug = topic.get("slug", "")
        image = topic.get("image")
        image_id = image.get("id") if isinstance(image, dict) else None
        topics.append(Topic(
            slug=slug,
            link=f"{BASE_URL}/topic/{slug}",
            name=topic.get("name", ""),
            image=f"{CDN_URL}/{image_id}" if image_id else "",
            description=topic.get("description", ""),
        ))
    return topics
