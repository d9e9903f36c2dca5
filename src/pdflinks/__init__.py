from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from pdflinks.core import VERSION, FetchError, PdfLinksError, Settings
from pdflinks.core.console import configure_logging
from pdflinks.domain import LinkSet, ParserKind
from pdflinks.workflow import collect

__version__ = VERSION

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 40

EPILOG = """\
Examples:

  pdflinks https://example.com/documents

  pdflinks -o my_links.txt https://example.com/papers

  pdflinks --download https://example.com/reports

  pdflinks -d -D ./my_pdfs https://example.com/files
"""

app = typer.Typer(
    name="pdflinks",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pdflinks version {__version__}")
        raise typer.Exit()


def _print_links(links: LinkSet) -> None:
    typer.echo()
    typer.secho("PDF Links:", bold=True)
    typer.echo(SEPARATOR)
    for link in links:
        typer.echo(link)
    typer.echo(SEPARATOR)
    typer.echo()


@app.command(epilog=EPILOG)
def collect_command(
    url: str = typer.Argument(
        ..., metavar="URL", help="Webpage to scan for PDF links.", show_default=False
    ),
    download: bool = typer.Option(
        False, "-d", "--download", help="Download all found PDF files."
    ),
    output: Optional[Path] = typer.Option(
        None,
        "-o",
        "--output",
        metavar="FILE",
        help="Save links to FILE (default: pdflinks.txt).",
    ),
    directory: Optional[Path] = typer.Option(
        None,
        "-D",
        "--dir",
        metavar="DIR",
        help="Download directory (default: pdf_downloads).",
    ),
    quiet: bool = typer.Option(
        False, "-q", "--quiet", help="Suppress informational output (errors still shown)."
    ),
    jobs: int = typer.Option(
        1, "-j", "--jobs", min=1, help="Number of parallel downloads."
    ),
    parser: ParserKind = typer.Option(
        ParserKind.regex,
        "--parser",
        case_sensitive=False,
        help="Scan raw text for href attributes or walk parsed <a> elements.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "-v",
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version information and exit.",
    ),
) -> None:
    """Extract PDF links from a webpage and optionally download them."""
    configure_logging(quiet=quiet)
    try:
        collect(
            url,
            settings=Settings.from_env(),
            output=output,
            download=download,
            target_dir=directory,
            workers=jobs,
            parser=parser.value,
            progress=not quiet,
            on_links=_print_links,
        )
    except FetchError as exc:
        logger.error("%s", exc)
        logger.error("Please check the URL is correct and accessible.")
        raise typer.Exit(code=1) from exc
    except PdfLinksError as exc:
        logger.error("%s", exc)
        raise typer.Exit(code=1) from exc


# click reports usage errors with this status
USAGE_ERROR_STATUS = 2


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit status.

    Usage errors (missing URL, unknown option, extra arguments) are printed
    with the usage line and a help hint, and end with status 1 rather than
    click's default of 2.
    """
    configure_logging()
    command = typer.main.get_command(app)
    try:
        command.main(args=argv, prog_name="pdflinks", standalone_mode=True)
    except SystemExit as exc:
        status = exc.code
    else:
        status = 0
    if status is None:
        return 0
    if not isinstance(status, int):
        return 1
    return 1 if status == USAGE_ERROR_STATUS else status


def run() -> None:
    raise SystemExit(main())


__all__ = [
    "app",
    "main",
    "run",
]
