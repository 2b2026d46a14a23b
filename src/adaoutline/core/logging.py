"""Structured logging for outline builds.

structlog events are routed through stdlib logging so that each configured
output (stderr, stdout or a file) gets its own level and renderer. Every
event logged during a build carries that build's ``build_id``.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from adaoutline.config.models import LoggingConfig, LogOutputConfig

_build_id: ContextVar[str | None] = ContextVar("build_id", default=None)


def get_build_id() -> str | None:
    return _build_id.get()


def set_build_id(build_id: str | None = None) -> str:
    """Set or generate the build correlation ID."""
    bid = build_id or uuid4().hex[:12]
    _build_id.set(bid)
    return bid


def _add_build_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if bid := get_build_id():
        event_dict["build_id"] = bid
    return event_dict


_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    _add_build_id,  # type: ignore[list-item]
]


def configure_logging(config: LoggingConfig | None = None, *, verbose: bool = False) -> None:
    """Install structlog and one stdlib handler per configured output.

    Args:
        config: Logging section of the loaded configuration (defaults when None).
        verbose: Ignore ``config`` and log everything to stderr at DEBUG.
    """
    from adaoutline.config.models import LoggingConfig

    if verbose:
        config = LoggingConfig(level="DEBUG")
    elif config is None:
        config = LoggingConfig()

    default_level = logging.getLevelName(config.level)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration must reach loggers created at import time
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(default_level)

    for output in config.outputs:
        handler = _create_handler(output.destination)
        handler.setLevel(logging.getLevelName(output.level or config.level))
        handler.setFormatter(_formatter(output))
        root_logger.addHandler(handler)


def _formatter(output: LogOutputConfig) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        is_tty = output.destination in ("stderr", "stdout") and sys.stderr.isatty()
        renderer = structlog.dev.ConsoleRenderer(colors=is_tty, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def _create_handler(destination: str) -> logging.Handler:
    """Create handler for stderr, stdout, or an absolute file path."""
    if destination == "stderr":
        return logging.StreamHandler(sys.stderr)
    if destination == "stdout":
        return logging.StreamHandler(sys.stdout)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a")


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a lazy logger, safe to create at import time.

    Nothing is bound until the first log call, so module-level loggers follow
    whatever configure_logging() installed by then.
    """
    if name:
        return structlog.get_logger(name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]
