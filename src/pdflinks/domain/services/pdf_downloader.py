from __future__ import annotations

import itertools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable, Iterator

from tqdm import tqdm

from pdflinks.core import FetchError, ensure_dir
from pdflinks.core.console import SUCCESS
from pdflinks.domain.models import DownloadOutcome, DownloadSummary
from pdflinks.domain.services.fetcher import Fetcher

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "document.pdf"


class FilenameRegistry:
    """Hand out collision-free destination paths inside one directory.

    A name counts as taken when a file already exists under it, whether left
    by an earlier run or claimed earlier in this one. Claiming creates the
    file exclusively under a lock, so concurrent downloads never share a name.
    """

    def __init__(self, target_dir: Path) -> None:
        self.target_dir = target_dir
        self._lock = threading.Lock()

    @staticmethod
    def base_filename(url: str) -> str:
        path = url.split("?", 1)[0]
        return path.rsplit("/", 1)[-1] or DEFAULT_FILENAME

    @staticmethod
    def _candidates(filename: str) -> Iterator[str]:
        yield filename
        stem = filename[:-4] if filename.lower().endswith(".pdf") else filename
        for counter in itertools.count(1):
            yield f"{stem}_{counter}.pdf"

    def claim(self, filename: str) -> Path:
        candidates = self._candidates(filename)
        with self._lock:
            while True:
                dest_path = self.target_dir / next(candidates)
                try:
                    dest_path.open("xb").close()
                except FileExistsError:
                    continue
                return dest_path


class PdfDownloader:
    """Download PDF files into a destination directory."""

    def __init__(
        self, fetcher: Fetcher, *, workers: int = 1, progress: bool = True
    ) -> None:
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self.fetcher = fetcher
        self.workers = workers
        self.progress = progress

    def download_pdf(self, url: str, registry: FilenameRegistry) -> DownloadOutcome:
        filename = registry.base_filename(url)
        dest_path: Path | None = None
        try:
            dest_path = registry.claim(filename)
            with dest_path.open("wb") as handle:
                self.fetcher.stream_file(url, handle)
        except (FetchError, OSError) as exc:
            if dest_path is not None:
                dest_path.unlink(missing_ok=True)
            return DownloadOutcome.failure(url, filename, str(exc))
        return DownloadOutcome.success(url, dest_path)

    def _report(self, outcome: DownloadOutcome, count: int, total: int) -> None:
        if outcome.succeeded:
            logger.info(
                "[%s/%s] Downloaded: %s", count, total, outcome.filename, extra=SUCCESS
            )
        else:
            logger.warning(
                "[%s/%s] Failed: %s (%s)", count, total, outcome.filename, outcome.reason
            )

    def download_pdfs(self, urls: Iterable[str], target_dir: Path) -> DownloadSummary:
        urls = list(urls)
        total = len(urls)
        registry = FilenameRegistry(ensure_dir(Path(target_dir)))
        logger.info("Downloading %s PDF file(s) to %s", total, registry.target_dir)

        outcomes: list[DownloadOutcome | None] = [None] * total
        with tqdm(
            total=total,
            desc="Downloading PDFs",
            unit="file",
            disable=not self.progress,
        ) as bar:
            if self.workers == 1:
                for index, url in enumerate(urls):
                    outcomes[index] = self.download_pdf(url, registry)
                    self._report(outcomes[index], index + 1, total)
                    bar.update(1)
            else:
                with ThreadPoolExecutor(max_workers=self.workers) as pool:
                    future_to_index = {
                        pool.submit(self.download_pdf, url, registry): index
                        for index, url in enumerate(urls)
                    }
                    for count, future in enumerate(as_completed(future_to_index), 1):
                        index = future_to_index[future]
                        outcomes[index] = future.result()
                        self._report(outcomes[index], count, total)
                        bar.update(1)

        summary = DownloadSummary(tuple(outcomes))
        logger.info(
            "Downloaded %s/%s files to %s",
            summary.succeeded,
            summary.total,
            registry.target_dir,
            extra=SUCCESS,
        )
        if summary.failed:
            logger.warning("%s file(s) failed to download", summary.failed)
        return summary
