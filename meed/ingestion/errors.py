"""Exceptions raised by meed."""

from typing import Optional


class MeedError(Exception):
    """Base class for every error raised by meed."""


class ValidationError(MeedError, ValueError):
    """Bad arguments, or a payload missing its required structure."""


class UpstreamError(MeedError):
    """Medium answered with a failure status or an unexpected content type."""

    def __init__(self, message: str, status: Optional[int] = None, content_type: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.content_type = content_type


class ParseError(MeedError, ValueError):
    """A response body could not be parsed as RSS or JSON."""
