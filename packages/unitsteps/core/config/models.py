"""Configuration models for unitsteps."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator

from unitsteps.core.sampling.patterns import SamplePattern, UnknownPatternError, resolve_pattern
from unitsteps.core.sampling.sampler import OutputContainer, resolve_container


class SamplerConfig(BaseModel):
    """Default sampling strategy.

    Pattern names are resolved leniently ("inBetween", "in-between" and
    "in_between" are the same pattern).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pattern: SamplePattern = Field(
        default=SamplePattern.STEPS, description="Which subdivision points to sample"
    )

    container: OutputContainer = Field(
        default=OutputContainer.SEQUENCE,
        description="'sequence' (list) or 'array' (numpy.ndarray)",
    )

    dtype: str | None = Field(
        default=None,
        description="numpy dtype for the array container (None = object)",
    )

    @field_validator("pattern", mode="before")
    @classmethod
    def _resolve_pattern(cls, value: Any) -> SamplePattern:
        try:
            return resolve_pattern(value)
        except UnknownPatternError as e:
            raise ValueError(e.args[0]) from e

    @field_validator("container", mode="before")
    @classmethod
    def _resolve_container(cls, value: Any) -> OutputContainer:
        return resolve_container(value)

    @field_validator("dtype")
    @classmethod
    def _check_dtype(cls, value: str | None) -> str | None:
        if value is None:
            return None
        try:
            return np.dtype(value).name
        except TypeError as e:
            raise ValueError(f"Invalid numpy dtype: {value!r}") from e


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file (None = stdout)")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseModel):
    """Application-level configuration."""

    model_config = ConfigDict(extra="ignore")

    sampling: SamplerConfig = SamplerConfig()
    logging: LoggingConfig = LoggingConfig()

    @classmethod
    def default_path(cls) -> Path:
        """Default path for application config."""
        return Path("unitsteps.yaml")
