"""Centralised settings for page-title.

Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from pagetitle import __version__

# Load .env from the project root (one level up from the package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _optional_float(name: str) -> Optional[float]:
    value = os.environ.get(name, "").strip()
    return float(value) if value else None


def _log_level(name: str, default: str = "WARNING") -> str:
    """Return a level name ``logging`` knows, or *default* for unknown values."""
    value = os.environ.get(name, default).strip().upper()
    return value if isinstance(logging.getLevelName(value), int) else default


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # HTTP fetch
    # ------------------------------------------------------------------
    request_timeout: Optional[float] = field(
        default_factory=lambda: _optional_float("REQUEST_TIMEOUT")
    )
    follow_redirects: bool = field(
        default_factory=lambda: os.environ.get("FOLLOW_REDIRECTS", "true").strip().lower()
        in _TRUTHY
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get(
            "USER_AGENT", f"Mozilla/5.0 (compatible; page-title/{__version__})"
        )
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: _log_level("LOG_LEVEL")
    )


# Module-level singleton, import this everywhere:
#   from pagetitle.config import settings
settings = Settings()
