"""Logging setup for the repolayout CLI.

All modules log through stdlib ``logging.getLogger(__name__)``. This module
routes those records through structlog's ProcessorFormatter to stderr, so
stdout stays reserved for command results (and stays valid JSON under
``--json``).

The resolver binds ``repository`` and ``content_type`` as context variables
for the duration of a call; ``merge_contextvars`` adds them to every record.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "repolayout"


def _shared_processors(log_json: bool) -> list[structlog.types.Processor]:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if log_json:
        # Rejection tracebacks from the resolver become an "exception" string.
        processors.append(structlog.processors.format_exc_info)
    return processors


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(sort_keys=True)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        verbose: Show ``repolayout`` DEBUG records, which include each
            factory rejection. Otherwise WARNING and above.
        log_json: One JSON object per line instead of console output.
    """
    shared = _shared_processors(log_json)

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.clear_contextvars()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
