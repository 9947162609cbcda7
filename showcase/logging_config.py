"""Logging setup driven by the log_level / log_format config keys.

Call sites keep using ``logging.getLogger(__name__)``. The ``json`` format
renders those stdlib records through structlog's ProcessorFormatter, one
object per line; ``text`` goes through Rich.
"""

from __future__ import annotations

import logging

import structlog
from rich.logging import RichHandler

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(sort_keys=False),
        ],
    )


def configure_logging(level: str = "info", fmt: str = "text") -> None:
    """Install a single root handler. Safe to call more than once."""
    if fmt == "json":
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(json_formatter())
    else:
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))

    numeric_level = _LEVELS.get(level, logging.INFO)
    logging.basicConfig(level=numeric_level, handlers=[handler], force=True)
    # PyGithub and httpx are chatty at INFO
    for noisy in ("github", "httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(max(logging.WARNING, numeric_level))
