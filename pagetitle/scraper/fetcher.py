"""Asynchronous HTTP fetcher."""

from __future__ import annotations

import logging

import httpx

from pagetitle.config import settings
from pagetitle.errors import FetchFailed, ParseFailed
from pagetitle.scraper.models import RawPage

logger = logging.getLogger(__name__)

_DEFAULT_ENCODING = "utf-8"


def _decode_body(response: httpx.Response) -> str:
    """Decode the buffered body strictly with the declared charset (UTF-8 if none).

    Raises:
        ParseFailed: If the bytes are not valid in that charset or the charset
            is unknown.
    """
    encoding = response.charset_encoding or _DEFAULT_ENCODING
    try:
        return response.content.decode(encoding)
    except (UnicodeDecodeError, LookupError) as exc:
        logger.warning("Could not decode %s as %s: %s", response.url, encoding, exc)
        raise ParseFailed(f"could not decode response from {response.url} as {encoding}") from exc


async def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage` with the whole body as text.

    The task suspends twice: once for the response headers and once while
    the body is read into memory.

    Raises:
        FetchFailed: On transport errors and invalid URLs. A 4xx/5xx reply is
            not a failure; its body is returned like any other.
        ParseFailed: If the body cannot be decoded to text.
    """
    logger.debug("Fetching %s", url)
    try:
        async with httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
            follow_redirects=settings.follow_redirects,
        ) as client:
            async with client.stream("GET", url) as response:
                await response.aread()
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        raise FetchFailed(f"could not fetch {url}: {exc}") from exc

    logger.debug("HTTP %s for %s (%d bytes)", response.status_code, url, len(response.content))
    return RawPage(url=url, html=_decode_body(response), status_code=response.status_code)
