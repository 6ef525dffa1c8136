"""Configuration package with clean public API."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import OUTPUT_FORMATS, AppConfig, LoggingConfig, RunnerConfig, validate_config

__all__ = [
    # Main configuration
    "AppConfig",
    "validate_config",
    "OUTPUT_FORMATS",
    # Specific configurations
    "LoggingConfig",
    "RunnerConfig",
    # Configuration management
    "ConfigurationManager",
    "get_config_manager",
]
