"""Config module exports."""

from codeintel.config.loader import CodeIntelSettings, load_config
from codeintel.config.models import (
    AnalysisConfig,
    CodeIntelConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "AnalysisConfig",
    "CodeIntelConfig",
    "CodeIntelSettings",
    "LoggingConfig",
    "LogOutputConfig",
]
