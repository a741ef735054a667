"""structlog setup for the CLI.

Library modules only call ``logging.getLogger(__name__)``; records reach
structlog through ``ProcessorFormatter`` installed on the root handler.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING, Optional

import structlog

if TYPE_CHECKING:
    from streamfmt.core.config import ObservabilityConfig

_PRE_CHAIN = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
)


def _pick_renderer(log_format: str, stream: IO[str]):
    use_json = log_format == "json" or (log_format == "auto" and not stream.isatty())
    if use_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def _stream_handler(renderer, stream: IO[str]) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def setup_logging(config: ObservabilityConfig, stream: Optional[IO[str]] = None) -> logging.Handler:
    """Install one structlog-formatted handler on the root logger and return it."""
    target = stream if stream is not None else sys.stderr
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = _stream_handler(_pick_renderer(config.log_format, target), target)
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)
    logging.getLogger("streamfmt").setLevel(level)
    return handler
