"""Value objects passed between the link pipeline and the download manager."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator


@dataclass(frozen=True)
class LinkSet:
    """Resolved PDF links, deduplicated and sorted ascending."""

    links: tuple[str, ...] = ()

    @classmethod
    def from_links(cls, links: Iterable[str]) -> "LinkSet":
        return cls(tuple(sorted(set(links))))

    def __iter__(self) -> Iterator[str]:
        return iter(self.links)

    def __len__(self) -> int:
        return len(self.links)

    def to_text(self) -> str:
        return "".join(f"{link}\n" for link in self.links)


@dataclass(frozen=True)
class DownloadOutcome:
    """Result of one attempted download.

    A succeeded outcome carries the destination ``path``; a failed one
    carries the ``reason`` and never a path.
    """

    url: str
    filename: str
    path: Path | None = None
    reason: str | None = None

    @classmethod
    def success(cls, url: str, path: Path) -> "DownloadOutcome":
        return cls(url=url, filename=path.name, path=path)

    @classmethod
    def failure(cls, url: str, filename: str, reason: str) -> "DownloadOutcome":
        return cls(url=url, filename=filename, reason=reason)

    @property
    def succeeded(self) -> bool:
        return self.path is not None


@dataclass(frozen=True)
class DownloadSummary:
    outcomes: tuple[DownloadOutcome, ...] = ()

    @property
    def total(self) -> int:
        return len(self.outcomes)

    @property
    def succeeded(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.succeeded)

    @property
    def failed(self) -> int:
        return self.total - self.succeeded

    @property
    def paths(self) -> list[Path]:
        return [outcome.path for outcome in self.outcomes if outcome.path is not None]


@dataclass(frozen=True)
class CollectResult:
    base_url: str
    links: LinkSet
    output_path: Path | None = None
    summary: DownloadSummary | None = None
