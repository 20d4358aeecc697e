"""Core module exports."""

from codeintel.core.errors import (
    AnalysisError,
    CodeIntelError,
    ConfigError,
    ErrorCode,
)
from codeintel.core.logging import (
    clear_request_id,
    configure_logging,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "AnalysisError",
    "CodeIntelError",
    "ConfigError",
    "ErrorCode",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_request_id",
    "set_request_id",
]
