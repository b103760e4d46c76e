"""Logging setup for huak.

Every module logs through ``logging.getLogger(__name__)``; structlog only
formats the records. Output always goes to stderr so it never mixes with
command results or a printed completion script.
"""

from __future__ import annotations

import logging
import sys

import structlog

HUAK_LOGGER = "huak"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route log records to stderr, replacing any handler set up earlier.

    The ``huak`` logger emits DEBUG records with *verbose*, WARNING and
    above otherwise. Third-party loggers stay at WARNING.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(HUAK_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
