"""
Logging setup for the layoutsmith boundary.

The parse, repair, layout and render stages are pure. Only the pipeline and
the command line emit events, through structlog loggers bound here. Records
are written to stderr because the CLI prints documents on stdout.
"""

import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
JSON_FIELDS = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _stderr_handler(json_logs: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    if json_logs:
        handler.setFormatter(jsonlogger.JsonFormatter(JSON_FIELDS))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _processor_chain(json_logs: bool) -> list[Any]:
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer()
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    Route pipeline and CLI events through structlog.

    Args:
        level: Threshold name such as DEBUG or WARNING; unknown names mean INFO
        json_logs: Emit one JSON object per record instead of console lines
    """
    threshold = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=threshold, handlers=[_stderr_handler(json_logs)], force=True)

    structlog.configure(
        processors=_processor_chain(json_logs),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return the structlog logger for a module (pass ``__name__``)."""
    return structlog.get_logger(name)


class LogContext:
    """Bind key/value pairs to every event logged inside the block.

    The CLI wraps each command so records carry ``command=render`` and so on.
    """

    def __init__(self, **fields: Any):
        self.fields = fields

    def __enter__(self) -> "LogContext":
        structlog.contextvars.bind_contextvars(**self.fields)
        return self

    def __exit__(self, *exc_info: Any) -> None:
        structlog.contextvars.unbind_contextvars(*self.fields)
