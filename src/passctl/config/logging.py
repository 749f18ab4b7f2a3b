"""Logging for passctl: structlog in front of the stdlib ``logging`` tree.

Modules log through ``logging.getLogger(__name__)``; records are routed
through structlog's ProcessorFormatter so stdlib and structlog loggers
share one format on stderr. stdout stays reserved for command output.

``--log-json`` emits one JSON object per record (with ISO timestamps);
the default console renderer drops timestamps to keep interactive
output short. Every record carries the draft file it concerns.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog
from structlog.types import Processor

PACKAGE_LOGGER = "passctl"


def _shared_processors(*, log_json: bool) -> list[Processor]:
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
    ]
    if log_json:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    return processors


def _renderer(*, log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    draft_path: Path | None = None,
) -> None:
    """Install the stderr handler and set passctl's level.

    Args:
        verbose: DEBUG for ``passctl.*`` loggers; otherwise WARNING.
        log_json: JSON lines instead of the console renderer.
        draft_path: Bound as ``draft`` on every record until reconfigured.
    """
    shared = _shared_processors(log_json=log_json)

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json=log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)

    structlog.contextvars.clear_contextvars()
    if draft_path is not None:
        structlog.contextvars.bind_contextvars(draft=str(draft_path))
