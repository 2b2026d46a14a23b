"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (ADAOUTLINE__SECTION__KEY)
3. Repo YAML (.adaoutline/config.yaml)
4. Global YAML (~/.config/adaoutline/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    ADAOUTLINE__<SECTION>__<KEY>=<VALUE>

Examples:
    ADAOUTLINE__LOGGING__LEVEL=DEBUG
    ADAOUTLINE__OUTLINE__NESTING_STRATEGY=within
    ADAOUTLINE__OUTLINE__SORT=alphabetical
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from adaoutline.config.constants import DEFAULT_CATEGORIES, DEFAULT_PLACEHOLDER

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
NestingStrategyName = Literal["before", "within"]
SortName = Literal["none", "alphabetical"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        ADAOUTLINE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every outline build.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class OutlineConfig(BaseModel):
    """Navigation index configuration.

    Env vars:
        ADAOUTLINE__OUTLINE__CATEGORIES: JSON list of enabled category ids
        ADAOUTLINE__OUTLINE__NESTING_STRATEGY: before | within
        ADAOUTLINE__OUTLINE__SORT: none | alphabetical
        ADAOUTLINE__OUTLINE__PLACEHOLDER: Label for the 'within' parent entry
    """

    categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORIES),
        description="Enabled categories, in display order. Unknown ids are "
        "reported when the outline is built.",
    )
    category_names: dict[str, str] = Field(
        default_factory=dict,
        description="Display name overrides keyed by category id.",
    )
    nesting_strategy: NestingStrategyName = Field(
        default="before",
        description="How a container's own entry is placed relative to its members. "
        "'before' emits a leaf and a branch with the same name; 'within' emits "
        "one branch whose first child jumps to the container.",
    )
    sort: SortName = Field(
        default="none",
        description="Sibling ordering. 'none' keeps document order.",
    )
    placeholder: str = Field(
        default=DEFAULT_PLACEHOLDER,
        description="Label of the entry pointing at the container itself "
        "under the 'within' strategy.",
    )

    @field_validator("placeholder")
    @classmethod
    def validate_placeholder(cls, v: str) -> str:
        if not v:
            raise ValueError("Placeholder label must not be empty")
        return v

    @field_validator("categories")
    @classmethod
    def validate_categories(cls, v: list[str]) -> list[str]:
        if len(set(v)) != len(v):
            raise ValueError(f"Duplicate category ids: {v}")
        return v


class AdaOutlineConfig(BaseModel):
    """Root configuration for adaoutline.

    All settings can be configured via:
    1. Environment variables: ADAOUTLINE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    outline: OutlineConfig = Field(default_factory=OutlineConfig)
