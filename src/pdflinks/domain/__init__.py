from pdflinks.domain.mappers.link_mapper import LinkMapper
from pdflinks.domain.models import (
    CollectResult,
    DownloadOutcome,
    DownloadSummary,
    LinkSet,
)
from pdflinks.domain.services.fetcher import Fetcher
from pdflinks.domain.services.pdf_downloader import FilenameRegistry, PdfDownloader
from pdflinks.domain.services.pdf_link_extractor import (
    HtmlLinkExtractor,
    ParserKind,
    PdfLinkExtractor,
    RegexLinkExtractor,
    get_extractor,
)
from pdflinks.domain.services.url_resolver import UrlResolver

__all__ = [
    "CollectResult",
    "DownloadOutcome",
    "DownloadSummary",
    "Fetcher",
    "FilenameRegistry",
    "HtmlLinkExtractor",
    "LinkMapper",
    "LinkSet",
    "ParserKind",
    "PdfDownloader",
    "PdfLinkExtractor",
    "RegexLinkExtractor",
    "UrlResolver",
    "get_extractor",
]
