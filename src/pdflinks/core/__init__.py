from __future__ import annotations

from pathlib import Path

from pdflinks.core.config import VERSION, Settings
from pdflinks.core.errors import (
    DirectoryNotFoundError,
    FetchError,
    PdfLinksError,
    UsageError,
)


def ensure_dir(path: Path) -> Path:
    if path.exists() and not path.is_dir():
        raise DirectoryNotFoundError(f"The path '{path}' exists but is not a directory.")
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PdfLinksError(f"Cannot create directory {path}: {exc}") from exc
    return path


def ensure_parent(path: Path) -> Path:
    ensure_dir(path.parent)
    return path


__all__ = [
    "VERSION",
    "DirectoryNotFoundError",
    "FetchError",
    "PdfLinksError",
    "Settings",
    "UsageError",
    "ensure_dir",
    "ensure_parent",
]
