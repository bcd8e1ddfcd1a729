"""Logging setup: structlog on top of stdlib logging; logs on stderr, results on stdout."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

LOG_FILE = "logs.log"
_FORMAT = "[%(asctime)s] : %(levelname)s : %(message)s"


def configure_logging(verbose: bool = False, log_file: Optional[str | Path] = None) -> None:
    """
    Errors only by default; verbose shows everything on stderr.

    log_file adds a DEBUG-level file handler regardless of verbose.
    """
    console_level = logging.DEBUG if verbose else logging.ERROR

    root = logging.getLogger()
    root.handlers = []
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(console_level)
    stderr_handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(stderr_handler)
    root_level = console_level

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(file_handler)
        root_level = logging.DEBUG

    root.setLevel(root_level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
