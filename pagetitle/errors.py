"""Failure kinds for a single title lookup.

Each kind carries the process exit code the CLI uses for it. A page without
a ``<title>`` is not a failure and has no class here.
"""

from __future__ import annotations


class PageTitleError(Exception):
    """Base class for every failure that aborts a lookup."""

    exit_code: int = 1


class MissingArgument(PageTitleError):
    """No URL was given on the command line."""

    exit_code = 2


class FetchFailed(PageTitleError):
    """The HTTP request failed: transport error or bad URL. Status codes never raise."""

    exit_code = 3


class ParseFailed(PageTitleError):
    """The response body could not be turned into HTML text."""

    exit_code = 4
