"""Configuration schemas package."""

from .app_schema import OUTPUT_FORMATS, AppConfig, validate_config
from .logging_schema import LoggingConfig
from .runner_schema import RunnerConfig

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    "OUTPUT_FORMATS",
    # Section configurations
    "LoggingConfig",
    "RunnerConfig",
]
