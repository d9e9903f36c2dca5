from __future__ import annotations

import logging
from typing import Iterable

from pdflinks.core import UsageError
from pdflinks.domain.mappers.link_mapper import LinkMapper

logger = logging.getLogger(__name__)

_mapper = LinkMapper()


class UrlResolver:
    """Turn candidate hrefs into absolute URLs relative to a page URL."""

    @staticmethod
    def normalize_base_url(url: str) -> str:
        """Validate the page URL, prefixing ``https://`` when no scheme is given.

        Raises:
            UsageError: If *url* is empty.
        """
        url = url.strip()
        if not url:
            raise UsageError("No URL provided")
        if _mapper.is_absolute(url):
            return url
        logger.warning("URL doesn't start with http:// or https://")
        logger.info("Attempting with https://%s", url)
        return f"https://{url}"

    @staticmethod
    def resolve(base_url: str, link: str) -> str:
        """Resolve *link* against *base_url*.

        Path-relative links are joined literally onto the base directory;
        ``.`` and ``..`` segments are left as they are.
        """
        if _mapper.is_absolute(link):
            return link
        scheme, host, path = _mapper.split_base(base_url)
        if link.startswith("//"):
            return f"{scheme}:{link}"
        if link.startswith("/"):
            return f"{scheme}://{host}{link}"
        directory = path[: path.rfind("/") + 1] or "/"
        return f"{scheme}://{host}{directory}{link}"

    @classmethod
    def resolve_all(cls, base_url: str, links: Iterable[str]) -> list[str]:
        return [cls.resolve(base_url, link) for link in links]
