"""Console logging for the dockgen CLI via structlog.

Module code keeps using ``logging.getLogger(__name__)``; this only decides
where those records go and how they look.

Renderer selection:
  verbose=True   `ConsoleRenderer` with DEBUG level.
  verbose=False  `ConsoleRenderer` without colours at the configured level.

Logs go to stderr, stdout is reserved for ``generate -o -``.
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(verbose: bool = False, level: str = "INFO") -> None:
    """Configure structlog and bridge stdlib logging into it.

    Like ``logging.basicConfig``, the stdlib bridge is left alone when the
    root logger already has handlers (e.g. under a test runner).
    """
    shared_processors: list = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="%H:%M:%S"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer = structlog.dev.ConsoleRenderer(colors=verbose and sys.stderr.isatty())

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Bridge stdlib logging -> structlog so every module logger renders the same way.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    logging.basicConfig(
        handlers=[handler],
        level=logging.DEBUG if verbose else level.upper(),
    )
