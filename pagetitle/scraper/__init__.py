"""Scraper package: web fetch & title extraction."""

from pagetitle.scraper.extractor import extract_title
from pagetitle.scraper.fetcher import fetch_url
from pagetitle.scraper.models import RawPage, TitleResult

__all__ = ["fetch_url", "extract_title", "RawPage", "TitleResult"]
