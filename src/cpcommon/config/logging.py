"""structlog configuration for cp-common.

Library modules log through ``logging.getLogger(__name__)``. This module is
called once at the CLI edge and routes every record, stdlib or structlog,
through a single stderr handler whose ProcessorFormatter adds level, logger
name and timestamp:

- human (default): structlog console renderer
- JSON (``--log-json``): one JSON object per line
"""

from __future__ import annotations

import logging
import sys

import structlog

LIBRARY_LOGGER = "cpcommon"

# Kept at WARNING even when --verbose is given.
QUIET_LOGGERS = ("pluggy",)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(*, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and set logger levels.

    Safe to call repeatedly; the root logger never holds more than one handler.

    Args:
        verbose: DEBUG for the ``cpcommon`` logger; otherwise WARNING.
        log_json: JSON renderer instead of the console renderer.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json=log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger(LIBRARY_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
