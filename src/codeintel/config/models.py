"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CODEINTEL__SECTION__KEY)
3. Repo YAML (.codeintel/config.yaml)
4. Global YAML (~/.config/codeintel/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CODEINTEL__<SECTION>__<KEY>=<VALUE>

Examples:
    CODEINTEL__LOGGING__LEVEL=DEBUG
    CODEINTEL__ANALYSIS__IDENTIFIER_MARKER=identifier
    CODEINTEL__ANALYSIS__MEMOIZE_SCOPE_LOOKUP=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


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
        CODEINTEL__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every dropped definition.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class AnalysisConfig(BaseModel):
    """Scope resolution configuration.

    Env vars:
        CODEINTEL__ANALYSIS__IDENTIFIER_MARKER: Substring marking identifier-like node kinds
        CODEINTEL__ANALYSIS__SCOPE_CAPTURE: Capture name for scope boundaries
        CODEINTEL__ANALYSIS__DEFINITION_CAPTURE: Capture name for definitions
        CODEINTEL__ANALYSIS__MEMOIZE_SCOPE_LOOKUP: Cache nearest-scope per node
    """

    identifier_marker: str = Field(
        default="identifier",
        description="Any node whose kind contains this substring is a candidate reference. "
        "Matches identifier, field_identifier, type_identifier, etc.",
    )
    scope_capture: str = Field(
        default="scope",
        description="Locals query capture name for scope boundary nodes.",
    )
    definition_capture: str = Field(
        default="definition",
        description="Locals query capture name for defining nodes.",
    )
    memoize_scope_lookup: bool = Field(
        default=True,
        description="Cache the nearest scope of each visited node during one analysis. "
        "Results are identical either way.",
    )

    @field_validator("identifier_marker", "scope_capture", "definition_capture")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v

    @model_validator(mode="after")
    def validate_distinct_captures(self) -> "AnalysisConfig":
        if self.scope_capture == self.definition_capture:
            raise ValueError(
                f"scope_capture and definition_capture must differ, both are {self.scope_capture!r}"
            )
        return self


class CodeIntelConfig(BaseModel):
    """Root configuration for codeintel.

    All settings can be configured via:
    1. Environment variables: CODEINTEL__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
