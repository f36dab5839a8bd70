"""page-title CLI: print the ``<title>`` of a web page.

Usage:
    python cli/main.py https://example.com
    page-title https://example.com

Prints exactly one line on success:
    The title for <url> was <title>
    <url> had no title
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from pagetitle.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import asyncio
import logging
from typing import Optional

import typer

from pagetitle.config import settings
from pagetitle.errors import MissingArgument, PageTitleError
from pagetitle.titles import format_result, page_title

app = typer.Typer(
    name="page-title",
    help="Fetch a web page and print its <title>.",
    add_completion=False,
)


def _configure_logging() -> None:
    """Send log records to stderr so stdout only carries the result line."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def require_url(url: Optional[str]) -> str:
    """Return *url*, or raise :class:`MissingArgument` when none was given."""
    if not url:
        raise MissingArgument("missing URL argument (usage: page-title URL)")
    return url


@app.command()
def main(
    url: Optional[str] = typer.Argument(None, help="URL of the page to fetch."),
) -> None:
    """Fetch URL and print the content of its first <title> element."""
    _configure_logging()
    try:
        url = require_url(url)
        title = asyncio.run(page_title(url))
    except PageTitleError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=exc.exit_code) from exc

    typer.echo(format_result(url, title))


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
