"""Pytest configuration and shared fixtures."""

import pytest
from unittest.mock import AsyncMock, MagicMock


USER_FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:content="http://purl.org/rss/1.0/modules/content/" xmlns:atom="http://www.w3.org/2005/Atom" version="2.0">
<channel>
<title><![CDATA[Stories by Alice on Medium]]></title>
<description><![CDATA[Stories by Alice on Medium]]></description>
<link>https://medium.com/@alice?source=rss-abc123------2</link>
<item>
<title><![CDATA[Async Python in Practice]]></title>
<link>https://medium.com/@alice/async-python-in-practice-1a2b3c?source=rss-abc123------2</link>
<guid isPermaLink="false">https://medium.com/p/1a2b3c</guid>
<category><![CDATA[python]]></category>
<category><![CDATA[asyncio]]></category>
<dc:creator><![CDATA[Alice]]></dc:creator>
<pubDate>Mon, 15 Jan 2024 10:30:45 GMT</pubDate>
<content:encoded><![CDATA[<p>Hello world</p>]]></content:encoded>
</item>
<item>
<title><![CDATA[Second Post]]></title>
<link>https://medium.com/@alice/second-post-4d5e6f?source=rss-abc123------2</link>
<guid isPermaLink="false">https://medium.com/p/4d5e6f</guid>
<dc:creator><![CDATA[Alice]]></dc:creator>
<pubDate>Tue, 16 Jan 2024 14:20:30 GMT</pubDate>
<content:encoded><![CDATA[<p>More words</p>]]></content:encoded>
</item>
</channel>
</rss>"""


TAG_FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<rss xmlns:dc="http://purl.org/dc/elements/1.1/" xmlns:content="http://purl.org/rss/1.0/modules/content/" version="2.0">
<channel>
<title><![CDATA[Python on Medium]]></title>
<description><![CDATA[Latest stories tagged with Python on Medium]]></description>
<link>https://medium.com/tag/python/latest?source=rss------python-5</link>
<item>
<title><![CDATA[Typing Tricks]]></title>
<link>https://medium.com/@bob/typing-tricks-7a8b9c?source=rss------python-5</link>
<guid isPermaLink="false">https://medium.com/p/7a8b9c</guid>
<category><![CDATA[python]]></category>
<dc:creator><![CDATA[Bob]]></dc:creator>
<pubDate>Wed, 17 Jan 2024 08:00:00 GMT</pubDate>
<description><![CDATA[<p>A short teaser</p>]]></description>
</item>
<item>
<title><![CDATA[Undated Post]]></title>
<link>https://medium.com/@bob/undated-post-0f0f0f?source=rss------python-5</link>
<guid isPermaLink="false">https://medium.com/p/0f0f0f</guid>
<dc:creator><![CDATA[Bob]]></dc:creator>
<description><![CDATA[<p>No date here</p>]]></description>
</item>
</channel>
</rss>"""


TOPICS_BODY = (
    '])}while(1);</x>{"success":true,"payload":{"references":{"Topic":'
    '{"t1":{"slug":"ai","name":"AI","image":{"id":"img1"},"description":"d"}}}}}'
)


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse."""

    def __init__(self, body: str = "", status: int = 200, content_type: str = "text/xml; charset=UTF-8"):
        self.status = status
        self.ok = 200 <= status < 300
        self.headers = {"Content-Type": content_type} if content_type is not None else {}
        self.text = AsyncMock(return_value=body)
        self.read = AsyncMock(return_value=body.encode("utf-8"))
        self.release = MagicMock()


@pytest.fixture
def make_response():
    """Build a FakeResponse."""
    return FakeResponse


@pytest.fixture
def user_feed_xml():
    return USER_FEED_XML


@pytest.fixture
def tag_feed_xml():
    return TAG_FEED_XML


@pytest.fixture
def topics_body():
    return TOPICS_BODY


@pytest.fixture
def rss_transport():
    """Transport answering every request with the user feed."""
    return AsyncMock(return_value=FakeResponse(USER_FEED_XML))


@pytest.fixture
def topics_transport():
    """Transport answering every request with the topics JSON."""
    return AsyncMock(return_value=FakeResponse(
        TOPICS_BODY, content_type="application/json; charset=utf-8"
    ))


@pytest.fixture
def session_get():
    """Build a mock ``ClientSession.get`` whose context yields ``response``."""
    def _build(response):
        context = MagicMock()
        context.__aenter__.return_value = response
        context.__aexit__.return_value = False
        return MagicMock(return_value=context)
    return _build
