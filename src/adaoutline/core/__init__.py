"""Core module exports."""

from adaoutline.core.errors import (
    AdaOutlineError,
    ConfigError,
    ErrorCode,
    ParseError,
)
from adaoutline.core.logging import (
    configure_logging,
    get_build_id,
    get_logger,
    set_build_id,
)

__all__ = [
    # Errors
    "AdaOutlineError",
    "ConfigError",
    "ErrorCode",
    "ParseError",
    # Logging
    "configure_logging",
    "get_build_id",
    "get_logger",
    "set_build_id",
]
