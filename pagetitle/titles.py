"""Page-title lookup: fetch → parse → select the first ``<title>``.

``page_title`` takes the fetch and query steps as optional parameters so the
pipeline can be driven with fixture HTML and no network::

    title = await page_title(url, fetch=fake_fetch)
"""

from __future__ import annotations

from typing import Awaitable, Callable, Optional

from pagetitle.scraper.extractor import extract_title
from pagetitle.scraper.fetcher import fetch_url
from pagetitle.scraper.models import RawPage, TitleResult

Fetch = Callable[[str], Awaitable[RawPage]]
Query = Callable[[str], Optional[str]]


async def page_title(
    url: str,
    fetch: Optional[Fetch] = None,
    query: Optional[Query] = None,
) -> Optional[str]:
    """Return the inner HTML of the first ``<title>`` at *url*, or ``None``.

    Args:
        url: Page to fetch, used verbatim.
        fetch: Async callable returning a :class:`RawPage`. Defaults to
            :func:`~pagetitle.scraper.fetcher.fetch_url`.
        query: Callable mapping HTML text to the title. Defaults to
            :func:`~pagetitle.scraper.extractor.extract_title`.

    Raises:
        FetchFailed, ParseFailed: Propagated unchanged from *fetch*; nothing
            is retried.
    """
    fetch = fetch or fetch_url
    query = query or extract_title

    raw = await fetch(url)
    return query(raw.html)


def format_result(url: str, title: Optional[str]) -> str:
    """Return the single output line for *url* and its (optional) *title*."""
    return TitleResult(url=url, title=title).render()
