"""codeintel error types with typed error codes.

Error code ranges:
- 2xxx: Config (YAML syntax, validation)
- 3xxx: Analysis (language lookup, grammar loading, query compilation, parsing)

Analysis is a pure function of its inputs, so nothing here is retryable.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Analysis (3xxx)
    UNSUPPORTED_LANGUAGE = 3001
    LANGUAGE_INIT_ERROR = 3002
    QUERY_COMPILATION_ERROR = 3003
    PARSE_FAILURE = 3004


@dataclass(frozen=True, slots=True)
class CodeIntelError(Exception):
    """Base error with structured context for JSON output."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'UNSUPPORTED_LANGUAGE')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CodeIntelError):
    """A config file could not be read or a value failed validation."""

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


class AnalysisError(CodeIntelError):
    """Errors raised while turning source bytes into a symbol table."""

    @classmethod
    def unsupported_language(cls, language_id: str) -> "AnalysisError":
        return cls(
            code=ErrorCode.UNSUPPORTED_LANGUAGE,
            message=f"Unsupported language: {language_id!r}",
            details={"language": language_id},
        )

    @classmethod
    def language_init(cls, language_id: str, reason: str) -> "AnalysisError":
        return cls(
            code=ErrorCode.LANGUAGE_INIT_ERROR,
            message=f"Failed to load grammar for {language_id}: {reason}",
            details={"language": language_id, "reason": reason},
        )

    @classmethod
    def query_compilation(cls, language_id: str, reason: str) -> "AnalysisError":
        return cls(
            code=ErrorCode.QUERY_COMPILATION_ERROR,
            message=f"Locals query for {language_id} failed to compile: {reason}",
            details={"language": language_id, "reason": reason},
        )

    @classmethod
    def parse_failure(cls, language_id: str) -> "AnalysisError":
        return cls(
            code=ErrorCode.PARSE_FAILURE,
            message=f"Parser produced no tree for {language_id} source",
            details={"language": language_id},
        )
