"""Checks on transport responses before their bodies are parsed."""

import structlog

from .errors import UpstreamError

logger = structlog.get_logger()


def _is_ok(response) -> bool:
    ok = getattr(response, "ok", None)
    if ok is None:
        return 200 <= response.status < 300
    return bool(ok)


async def check_response(response, content_type: str) -> str:
    """Return the body of ``response`` if it succeeded with the expected type.

    ``content_type`` is matched as a substring of the lower-cased
    ``Content-Type`` header, so ``text/xml`` accepts
    ``text/xml; charset=UTF-8``.
    """
    status = getattr(response, "status", None)
    if not _is_ok(response):
        raise UpstreamError(f"Response code not OK: {status}", status=status)

    actual = response.headers.get("Content-Type") or ""
    if content_type not in actual.lower():
        raise UpstreamError(
            f"Response type not {content_type}: {actual}",
            status=status,
            content_type=actual,
        )

    text = await response.text()
    logger.debug("response_read", status=status, content_type=actual, length=len(text))
    return text
