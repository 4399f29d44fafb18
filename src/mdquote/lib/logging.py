"""Structlog configuration for the mdquote command line.

The formatter itself logs through stdlib ``logging`` (truncation events at
DEBUG); the CLI logs through structlog. Both end up on stderr with the same
renderer, so ``-vv --json`` yields one JSON object per line from either side.
"""

from __future__ import annotations

import logging as std_logging
import sys

import structlog


def _level_from_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return std_logging.WARNING
    if verbosity == 1:
        return std_logging.INFO
    return std_logging.DEBUG


def _renderer(json_mode: bool) -> structlog.typing.Processor:
    if json_mode:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(json_mode: bool = False, verbosity: int = 0) -> None:
    """Configure stdlib logging and structlog for the command line."""

    level = _level_from_verbosity(verbosity)
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    # Quotes go to stdout; logs must never be mixed into them.
    handler = std_logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.processors.add_log_level,
                timestamper,
            ],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_mode),
            ],
        )
    )
    std_logging.basicConfig(level=level, handlers=[handler], force=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            timestamper,
            _renderer(json_mode),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
