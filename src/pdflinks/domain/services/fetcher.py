from __future__ import annotations

import io
import logging
import time
from typing import BinaryIO

import httpx

from pdflinks.core import FetchError, Settings

logger = logging.getLogger(__name__)

_clock = time.monotonic


class Fetcher:
    """Retrieve page content and file bytes over HTTP.

    Redirects are followed and every request carries the pdflinks user
    agent. Bodies are streamed; a page fetch must finish within
    ``settings.page_timeout`` seconds overall. Transport failures surface as
    :class:`FetchError`; HTTP status codes are only logged unless
    ``settings.strict_status`` is set.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        headers = {"User-Agent": self.settings.user_agent}
        self._page_timeout = httpx.Timeout(
            self.settings.page_timeout, connect=self.settings.connect_timeout
        )
        self._file_timeout = httpx.Timeout(
            self.settings.file_timeout, connect=self.settings.connect_timeout
        )
        self._client = httpx.Client(
            headers=headers, timeout=self._page_timeout, follow_redirects=True
        )
        self._closed = False

    def close(self) -> None:
        if not self._closed:
            self._client.close()
            self._closed = True

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _check_status(self, url: str, response: httpx.Response) -> None:
        if response.is_success:
            return
        if self.settings.strict_status:
            raise FetchError(url, f"HTTP {response.status_code}")
        logger.warning("%s answered with HTTP %s", url, response.status_code)

    def _stream(
        self,
        url: str,
        handle: BinaryIO,
        timeout: httpx.Timeout,
        deadline: float | None = None,
    ) -> str:
        """Copy the body of *url* into *handle* and return its text encoding."""
        started = _clock()
        try:
            with self._client.stream("GET", url, timeout=timeout) as response:
                self._check_status(url, response)
                for chunk in response.iter_bytes():
                    if deadline is not None and _clock() - started > deadline:
                        raise FetchError(url, f"timed out after {deadline:g}s")
                    handle.write(chunk)
                return response.encoding or "utf-8"
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc

    def fetch_page(self, url: str) -> str:
        buffer = io.BytesIO()
        encoding = self._stream(
            url, buffer, self._page_timeout, deadline=self.settings.page_timeout
        )
        return buffer.getvalue().decode(encoding, errors="replace")

    def fetch_file(self, url: str) -> bytes:
        buffer = io.BytesIO()
        self.stream_file(url, buffer)
        return buffer.getvalue()

    def stream_file(self, url: str, handle: BinaryIO) -> None:
        self._stream(url, handle, self._file_timeout)
