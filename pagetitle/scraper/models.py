"""Data models for the fetch-and-extract pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RawPage:
    """The fully buffered, decoded HTTP response for a single URL fetch."""

    url: str
    html: str
    status_code: int


@dataclass(frozen=True)
class TitleResult:
    """Outcome of a title lookup; ``title`` is ``None`` when the page has none."""

    url: str
    title: Optional[str] = None

    def render(self) -> str:
        if self.title is None:
            return f"{self.url} had no title"
        return f"The title for {self.url} was {self.title}"
