"""Unified configuration management for the application."""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml
from pydantic import ValidationError

from pattern_catalog.config.schemas import AppConfig, LoggingConfig, RunnerConfig
from pattern_catalog.domain.base.exceptions import ConfigurationError

T = TypeVar("T")
logger = logging.getLogger(__name__)

ENV_PREFIX = "PATTERN_CATALOG_"
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Provides:
    - Type safety through pydantic schemas
    - JSON and YAML configuration files
    - Environment variable overrides
    - Lazy loading
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e}", details={"source": self._config_file}
            ) from e

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """Load a configuration dictionary from a JSON or YAML file."""
        path = Path(config_file)
        if not path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {config_file}", details={"source": config_file}
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() in (".yaml", ".yml"):
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to read configuration file {config_file}: {e}",
                details={"source": config_file},
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping",
                details={"source": config_file},
            )

        logger.debug("Loaded configuration from %s", config_file)
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply PATTERN_CATALOG_* environment variable overrides."""
        data = dict(config_data)
        logging_section = dict(data.get("logging") or {})
        runner_section = dict(data.get("runner") or {})

        level = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL")
        if level:
            logging_section["level"] = level

        parallel = os.environ.get(f"{ENV_PREFIX}PARALLEL")
        if parallel:
            runner_section["parallel"] = _parse_bool(f"{ENV_PREFIX}PARALLEL", parallel)

        max_workers = os.environ.get(f"{ENV_PREFIX}MAX_WORKERS")
        if max_workers:
            try:
                runner_section["max_workers"] = int(max_workers)
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_PREFIX}MAX_WORKERS must be an integer, got '{max_workers}'"
                ) from e

        if logging_section:
            data["logging"] = logging_section
        if runner_section:
            data["runner"] = runner_section
        return data

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a typed configuration section."""
        type_mapping = {
            AppConfig: lambda: self.app_config,
            LoggingConfig: lambda: self.app_config.logging,
            RunnerConfig: lambda: self.app_config.runner,
        }
        if config_type not in type_mapping:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return type_mapping[config_type]()

    def reload(self) -> None:
        """Reload configuration from sources."""
        with self._lock:
            self._app_config = None


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{key} must be a boolean, got '{value}'")


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_file)
