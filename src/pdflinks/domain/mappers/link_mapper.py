from __future__ import annotations

import re
from typing import Iterable

DEFAULT_PATTERNS = {
    # href='...pdf' or href="...pdf?query", not data-href or other suffixed names
    "pdf_href": (
        r"(?<![\w-])href="
        r"(?P<quote>[\"'])"
        r"(?P<url>[^\"']*\.pdf(?:\?[^\"']*)?)"
        r"(?P=quote)"
    ),
    "pdf_target": r"\.pdf(?:\?[^\"']*)?\Z",
    "absolute": r"^https?://",
    "base": (
        r"^(?P<scheme>[a-z][a-z0-9+.\-]*)://"
        r"(?P<host>[^/?#]*)"
        r"(?P<path>[^?#]*)"
    ),
}

FLAGS = re.I


class LinkMapper:
    """Reusable regex helpers for PDF href scanning and URL splitting."""

    def __init__(self) -> None:
        self.patterns = dict(DEFAULT_PATTERNS)
        self._pdf_href = re.compile(self.patterns["pdf_href"], FLAGS)
        self._pdf_target = re.compile(self.patterns["pdf_target"], FLAGS)
        self._absolute = re.compile(self.patterns["absolute"], FLAGS)
        self._base = re.compile(self.patterns["base"], FLAGS)

    def iter_hrefs(self, text: str) -> Iterable[str]:
        return (match.group("url") for match in self._pdf_href.finditer(text))

    def is_pdf_target(self, value: str) -> bool:
        return self._pdf_target.search(value) is not None

    def is_absolute(self, value: str) -> bool:
        return self._absolute.match(value) is not None

    def split_base(self, url: str) -> tuple[str, str, str]:
        """Return ``(scheme, host, path)`` for *url*.

        A URL without a scheme is read as ``https``; this never raises.
        """
        match = self._base.match(url) or self._base.match(f"https://{url}")
        return match.group("scheme"), match.group("host"), match.group("path")
