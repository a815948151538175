"""Structured logging — structlog on top of stdlib logging.

Console output goes to stderr so it never mixes with the report on
stdout.  A JSON-lines file can be added for audit trails:

    setup_logging("DEBUG", log_file=Path("cleaner.jsonl"))
    log = get_logger(__name__)
    log.info("file_written", path="src/bang.ts", removed=3)
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import cast

import structlog


def setup_logging(
    log_level: str = "WARNING",
    *,
    console_output: bool = True,
    log_file: Path | None = None,
) -> None:
    """Configure structlog to render through stdlib handlers."""
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.root.handlers.clear()
    logging.root.setLevel(level)

    # No final renderer here; each handler's ProcessorFormatter adds one
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processors=[*shared_processors, structlog.dev.ConsoleRenderer()],
        ))
        logging.root.addHandler(console_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(structlog.stdlib.ProcessorFormatter(
            processors=[*shared_processors, structlog.processors.JSONRenderer()],
        ))
        logging.root.addHandler(file_handler)

    if not logging.root.handlers:
        logging.root.addHandler(logging.NullHandler())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a bound logger for a module."""
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))
