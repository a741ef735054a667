"""Nested pydantic-settings configuration for streamfmt.

Each sub-model reads its own ``STREAMFMT_<GROUP>_*`` env vars::

    export STREAMFMT_WRITER_COMPACT=true
    export STREAMFMT_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class WriterConfig(BaseSettings):
    """Rendering options fixed for the life of a writer.

    Env vars use ``STREAMFMT_WRITER_`` prefix.
    """

    model_config = {"env_prefix": "STREAMFMT_WRITER_"}

    compact: bool = False
    indent_step: int = Field(default=2, ge=1, le=16)
    strict: bool = True
    # Reproduce the reference behavior where opening an array keeps the
    # parent's cursor, so the first element inherits a leading comma.
    legacy_array_cursor: bool = False


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``STREAMFMT_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "STREAMFMT_OBSERVABILITY_"}

    log_level: str = "WARNING"
    # "auto" picks console output on a TTY and JSON lines otherwise.
    log_format: Literal["auto", "console", "json"] = "auto"


class AppSettings(BaseSettings):
    """Top-level settings aggregating all sub-configs."""

    writer: WriterConfig = Field(default_factory=WriterConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
