"""Process-wide settings for pdflinks.

Settings are resolved once at startup and handed to the workflow and CLI
glue. Values can be overridden through ``PDFLINKS_*`` environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from pdflinks.core.errors import UsageError

VERSION = "2.0.0"
DEFAULT_OUTPUT_FILE = "pdflinks.txt"
DEFAULT_DOWNLOAD_DIR = "pdf_downloads"
DEFAULT_USER_AGENT = f"Mozilla/5.0 (compatible; pdflinks/{VERSION})"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name, "").strip()
    return raw or default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise UsageError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise UsageError(f"{name} must be greater than zero, got {raw!r}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise UsageError(f"{name} must be a boolean, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    version: str = VERSION
    default_output: str = DEFAULT_OUTPUT_FILE
    default_download_dir: str = DEFAULT_DOWNLOAD_DIR
    user_agent: str = DEFAULT_USER_AGENT
    # seconds
    connect_timeout: float = 10.0
    page_timeout: float = 60.0
    file_timeout: float = 300.0
    strict_status: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the environment, falling back to defaults.

        Raises:
            UsageError: If a variable is set to a value that cannot be parsed.
        """
        return cls(
            default_output=_env_str("PDFLINKS_OUTPUT", DEFAULT_OUTPUT_FILE),
            default_download_dir=_env_str("PDFLINKS_DIR", DEFAULT_DOWNLOAD_DIR),
            user_agent=_env_str("PDFLINKS_USER_AGENT", DEFAULT_USER_AGENT),
            connect_timeout=_env_float("PDFLINKS_CONNECT_TIMEOUT", 10.0),
            page_timeout=_env_float("PDFLINKS_PAGE_TIMEOUT", 60.0),
            file_timeout=_env_float("PDFLINKS_FILE_TIMEOUT", 300.0),
            strict_status=_env_bool("PDFLINKS_STRICT_STATUS", False),
        )
