"""adaoutline error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Parse
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_UNKNOWN_CATEGORY = 2005

    # Parse (3xxx)
    PARSE_UNSUPPORTED_FILE = 3001
    PARSE_GRAMMAR_UNAVAILABLE = 3002


@dataclass(frozen=True, slots=True)
class AdaOutlineError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'CONFIG_PARSE_ERROR')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(AdaOutlineError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def unknown_category(cls, category: str, known: list[str]) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_UNKNOWN_CATEGORY,
            message=f"Unknown outline category: {category}",
            details={"category": category, "known": known},
        )


class ParseError(AdaOutlineError):
    """Errors raised before a syntax tree is available."""

    @classmethod
    def unsupported_file(cls, path: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_UNSUPPORTED_FILE,
            message=f"Not an Ada source file: {path}",
            details={"path": path},
        )

    @classmethod
    def grammar_unavailable(cls, module: str) -> "ParseError":
        return cls(
            code=ErrorCode.PARSE_GRAMMAR_UNAVAILABLE,
            message=f"Grammar module '{module}' is not installed. "
            "Run 'ada-outline install-grammar' first.",
            retryable=True,
            details={"module": module},
        )
