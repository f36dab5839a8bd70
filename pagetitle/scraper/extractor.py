"""Title extraction from a fetched HTML document."""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup

TITLE_SELECTOR = "title"


def extract_title(html: str) -> Optional[str]:
    """Return the inner HTML of the first ``<title>`` element, or ``None``.

    The contents are serialised the way BeautifulSoup writes them back out,
    so character references such as ``&amp;`` come back escaped and
    surrounding whitespace is kept as-is.
    """
    soup = BeautifulSoup(html, "html.parser")
    element = soup.select_one(TITLE_SELECTOR)
    if element is None:
        return None
    return element.decode_contents()
