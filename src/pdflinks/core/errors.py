from __future__ import annotations


class PdfLinksError(Exception):
    """Base class for errors that end a run with a non-zero exit status."""


class UsageError(PdfLinksError):
    """Raised for bad or missing arguments, before any network activity."""


class FetchError(PdfLinksError):
    """Raised when a page or file cannot be retrieved."""

    def __init__(self, url: str, cause: str) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to fetch URL: {url} ({cause})")


class DirectoryNotFoundError(PdfLinksError, FileNotFoundError):
    """Raised when a required directory is missing."""
