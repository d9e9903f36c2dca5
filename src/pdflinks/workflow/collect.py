from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

from pdflinks.core import PdfLinksError, Settings, ensure_parent
from pdflinks.core.console import SUCCESS
from pdflinks.domain import (
    CollectResult,
    Fetcher,
    LinkSet,
    PdfDownloader,
    PdfLinkExtractor,
    UrlResolver,
    get_extractor,
)

logger = logging.getLogger(__name__)


def find_links(
    base_url: str, fetcher: Fetcher, extractor: PdfLinkExtractor
) -> LinkSet:
    html = fetcher.fetch_page(base_url)
    candidates = extractor.extract(html)
    return LinkSet.from_links(UrlResolver.resolve_all(base_url, candidates))


def write_links(links: LinkSet, output: Path) -> Path:
    ensure_parent(output)
    try:
        output.write_text(links.to_text(), encoding="utf-8")
    except OSError as exc:
        raise PdfLinksError(f"Cannot write {output}: {exc}") from exc
    logger.info("Links saved to: %s", output)
    return output


def collect(
    url: str,
    *,
    settings: Settings | None = None,
    output: Path | None = None,
    download: bool = False,
    target_dir: Path | None = None,
    workers: int = 1,
    parser: str = "regex",
    progress: bool = True,
    on_links: Callable[[LinkSet], None] | None = None,
) -> CollectResult:
    """Fetch *url*, save the PDF links it references and optionally download them.

    Nothing is written when the page cannot be fetched or has no PDF links.
    ``on_links`` is called with the links before they are saved.

    Raises:
        UsageError: If *url* is empty or *parser* is unknown.
        FetchError: If the page itself cannot be fetched.
    """
    settings = settings or Settings()
    base_url = UrlResolver.normalize_base_url(url)
    extractor = get_extractor(parser)
    output = Path(output or settings.default_output)
    target_dir = Path(target_dir or settings.default_download_dir)

    logger.info("Fetching PDF links from: %s", base_url)
    with Fetcher(settings) as fetcher:
        links = find_links(base_url, fetcher, extractor)
        if not links:
            logger.warning("No PDF links found on this page")
            return CollectResult(base_url=base_url, links=links)

        logger.info("Found %s PDF link(s)", len(links), extra=SUCCESS)
        if on_links is not None:
            on_links(links)
        output_path = write_links(links, output)

        summary = None
        if download:
            downloader = PdfDownloader(fetcher, workers=workers, progress=progress)
            summary = downloader.download_pdfs(links, target_dir)

    logger.info("Done!", extra=SUCCESS)
    return CollectResult(
        base_url=base_url, links=links, output_path=output_path, summary=summary
    )
