from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from bs4 import BeautifulSoup

from pdflinks.core import UsageError
from pdflinks.domain.mappers.link_mapper import LinkMapper

logger = logging.getLogger(__name__)


class PdfLinkExtractor:
    """Extract distinct candidate PDF hrefs from page content, sorted."""

    def __init__(self) -> None:
        self.mapper = LinkMapper()

    def find_links(self, html: str) -> Iterable[str]:
        raise NotImplementedError

    def extract(self, html: str) -> list[str]:
        links = sorted(set(self.find_links(html)))
        logger.debug(
            "Extracted %s PDF links with %s", len(links), type(self).__name__
        )
        return links


class RegexLinkExtractor(PdfLinkExtractor):
    """Textual scan for ``href="...pdf"`` attributes anywhere in the page."""

    def find_links(self, html: str) -> Iterable[str]:
        return self.mapper.iter_hrefs(html)


class HtmlLinkExtractor(PdfLinkExtractor):
    """Walk ``<a href>`` elements of the parsed document."""

    def find_links(self, html: str) -> Iterable[str]:
        soup = BeautifulSoup(html, "html.parser")
        for anchor in soup.find_all("a", href=True):
            href = str(anchor.get("href", ""))
            if self.mapper.is_pdf_target(href):
                yield href


class ParserKind(str, Enum):
    regex = "regex"
    html = "html"


EXTRACTORS: dict[str, type[PdfLinkExtractor]] = {
    ParserKind.regex.value: RegexLinkExtractor,
    ParserKind.html.value: HtmlLinkExtractor,
}


def get_extractor(name: str) -> PdfLinkExtractor:
    extractor = EXTRACTORS.get(name.strip().lower())
    if extractor is None:
        options = ", ".join(sorted(EXTRACTORS))
        raise UsageError(f"Unknown parser '{name}'. Choose one of: {options}.")
    return extractor()
