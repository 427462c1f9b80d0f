"""Configuration management for unitsteps."""

from unitsteps.core.config.loader import (
    configure_logging,
    detect_format,
    load_app_config,
    load_config,
    load_sampler_config,
)
from unitsteps.core.config.models import AppConfig, LoggingConfig, SamplerConfig

__all__ = [
    # Loaders
    "load_config",
    "load_app_config",
    "load_sampler_config",
    "detect_format",
    "configure_logging",
    # Models
    "AppConfig",
    "LoggingConfig",
    "SamplerConfig",
]
