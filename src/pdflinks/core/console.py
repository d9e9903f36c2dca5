from __future__ import annotations

import logging
import sys

import click
from tqdm import tqdm

PACKAGE_LOGGER = "pdflinks"

# Pass as ``extra`` to render an INFO record with the success tag.
SUCCESS = {"success": True}

_LEVEL_TAGS = {
    logging.DEBUG: ("[DEBUG]", "bright_black"),
    logging.INFO: ("[INFO]", "blue"),
    logging.WARNING: ("[WARN]", "yellow"),
    logging.ERROR: ("[ERROR]", "red"),
    logging.CRITICAL: ("[ERROR]", "red"),
}
_SUCCESS_TAG = ("[OK]", "green")


class ConsoleFormatter(logging.Formatter):
    """Prefix each message with a colored level tag."""

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if getattr(record, "success", False):
            tag, color = _SUCCESS_TAG
        else:
            tag, color = _LEVEL_TAGS.get(record.levelno, _LEVEL_TAGS[logging.INFO])
        return f"{click.style(tag, fg=color)} {message}"


class ConsoleHandler(logging.Handler):
    """Write records to stderr through tqdm so progress bars stay intact."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            stream = sys.stderr
            if not stream.isatty():
                message = click.unstyle(message)
            tqdm.write(message, file=stream)
        except Exception:
            self.handleError(record)


def configure_logging(quiet: bool = False) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.WARNING if quiet else logging.INFO)
    if not any(isinstance(handler, ConsoleHandler) for handler in logger.handlers):
        handler = ConsoleHandler()
        handler.setFormatter(ConsoleFormatter())
        logger.addHandler(handler)
    return logger
