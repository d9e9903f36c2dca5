from __future__ import annotations

import httpx
import pytest
import respx

from pdflinks.core import FetchError, Settings
from pdflinks.domain import Fetcher, LinkSet, RegexLinkExtractor
from pdflinks.workflow import collect, find_links, write_links

_URL = "https://example.com/section/index.html"


def test_find_links_resolves_and_sorts(settings: Settings) -> None:
    page = '<a href="b.pdf">b</a><a href="a.pdf">a</a><a href="//cdn.example.org/z.pdf">z</a>'
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text=page))
        with Fetcher(settings) as fetcher:
            links = find_links(_URL, fetcher, RegexLinkExtractor())

    assert list(links) == [
        "https://cdn.example.org/z.pdf",
        "https://example.com/section/a.pdf",
        "https://example.com/section/b.pdf",
    ]


def test_find_links_dedupes_after_resolution(settings: Settings) -> None:
    page = '<a href="a.pdf">1</a><a href="/section/a.pdf">2</a>'
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text=page))
        with Fetcher(settings) as fetcher:
            links = find_links(_URL, fetcher, RegexLinkExtractor())

    assert list(links) == ["https://example.com/section/a.pdf"]


def test_write_links_creates_parent(tmp_path) -> None:
    output = tmp_path / "reports" / "links.txt"
    write_links(LinkSet.from_links(["https://e.com/b.pdf", "https://e.com/a.pdf"]), output)
    assert output.read_text() == "https://e.com/a.pdf\nhttps://e.com/b.pdf\n"


def test_collect_reports_links_before_saving(tmp_path) -> None:
    output = tmp_path / "links.txt"
    seen: list[LinkSet] = []

    def on_links(links: LinkSet) -> None:
        assert not output.exists()
        seen.append(links)

    with respx.mock:
        respx.get(_URL).mock(
            return_value=httpx.Response(200, text='<a href="docs/file.pdf">x</a>')
        )
        result = collect(_URL, output=output, on_links=on_links, progress=False)

    assert result.base_url == _URL
    assert list(result.links) == ["https://example.com/section/docs/file.pdf"]
    assert result.output_path == output
    assert result.summary is None
    assert seen == [result.links]


def test_collect_with_download(tmp_path) -> None:
    file_url = "https://example.com/section/a.pdf"
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text='<a href="a.pdf">'))
        respx.get(file_url).mock(return_value=httpx.Response(200, content=b"%PDF"))
        result = collect(
            _URL,
            output=tmp_path / "links.txt",
            download=True,
            target_dir=tmp_path / "pdfs",
            progress=False,
        )

    assert result.summary is not None
    assert (result.summary.total, result.summary.succeeded) == (1, 1)
    assert (tmp_path / "pdfs" / "a.pdf").read_bytes() == b"%PDF"


def test_collect_without_links_writes_nothing(tmp_path) -> None:
    output = tmp_path / "links.txt"
    with respx.mock:
        respx.get(_URL).mock(return_value=httpx.Response(200, text="<p>none</p>"))
        result = collect(_URL, output=output, download=True, target_dir=tmp_path / "pdfs")

    assert len(result.links) == 0
    assert result.output_path is None
    assert not output.exists()
    assert not (tmp_path / "pdfs").exists()


def test_collect_page_failure_propagates(tmp_path) -> None:
    output = tmp_path / "links.txt"
    with respx.mock:
        respx.get(_URL).mock(side_effect=httpx.ConnectError("dns failure"))
        with pytest.raises(FetchError):
            collect(_URL, output=output)

    assert not output.exists()
