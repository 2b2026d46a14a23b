"""Config module exports."""

from adaoutline.config.loader import load_config
from adaoutline.config.models import (
    AdaOutlineConfig,
    LoggingConfig,
    LogOutputConfig,
    OutlineConfig,
)

__all__ = [
    "load_config",
    "AdaOutlineConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "OutlineConfig",
]
