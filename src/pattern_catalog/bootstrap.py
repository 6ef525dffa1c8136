"""Application bootstrap - wires configuration, logging and services."""

from __future__ import annotations

from typing import Optional

from pattern_catalog.application.runner import DemonstrationRunner
from pattern_catalog.application.validator import OutputValidator
from pattern_catalog.config import AppConfig
from pattern_catalog.config.manager import ConfigurationManager, get_config_manager
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry.demonstration_registry import (
    DemonstrationRegistry,
    get_demonstration_registry,
)


class Application:
    """Application context holding the registry and its services."""

    def __init__(
        self,
        config_path: Optional[str] = None,
        log_level: Optional[str] = None,
        parallel: Optional[bool] = None,
        registry: Optional[DemonstrationRegistry] = None,
    ) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._log_level = log_level
        self._parallel = parallel
        self._registry = registry
        self._config_manager: Optional[ConfigurationManager] = None
        self._config: Optional[AppConfig] = None
        self._runner: Optional[DemonstrationRunner] = None
        self._validator: Optional[OutputValidator] = None
        self._initialized = False

        self.logger = get_logger(__name__)

    def initialize(self) -> bool:
        """
        Load configuration, configure logging and build the registry.

        Raises:
            ConfigurationError: If configuration cannot be loaded
        """
        if self._initialized:
            return True

        self._config_manager = get_config_manager(self.config_path)
        config = self._config_manager.app_config

        # Command-line values take precedence over file and environment
        if self._log_level:
            config = config.model_copy(
                update={"logging": config.logging.model_copy(update={"level": self._log_level.upper()})}
            )
        if self._parallel is not None:
            config = config.model_copy(
                update={"runner": config.runner.model_copy(update={"parallel": self._parallel})}
            )
        self._config = config

        setup_logging(config.logging)

        if self._registry is None:
            self._registry = get_demonstration_registry()

        self._runner = DemonstrationRunner(
            self._registry,
            parallel=config.runner.parallel,
            max_workers=config.runner.max_workers,
        )
        self._validator = OutputValidator()

        self._initialized = True
        self.logger.info(
            "Application initialized",
            patterns=len(self._registry),
            parallel=config.runner.parallel,
            config_file=self.config_path,
        )
        return True

    def _ensure_initialized(self) -> None:
        if not self._initialized:
            self.initialize()

    @property
    def config(self) -> AppConfig:
        self._ensure_initialized()
        return self._config

    @property
    def registry(self) -> DemonstrationRegistry:
        self._ensure_initialized()
        return self._registry

    @property
    def runner(self) -> DemonstrationRunner:
        self._ensure_initialized()
        return self._runner

    @property
    def validator(self) -> OutputValidator:
        self._ensure_initialized()
        return self._validator


def create_application(
    config_path: Optional[str] = None,
    log_level: Optional[str] = None,
    parallel: Optional[bool] = None,
) -> Application:
    """Create and initialize an application."""
    app = Application(config_path, log_level=log_level, parallel=parallel)
    app.initialize()
    return app
