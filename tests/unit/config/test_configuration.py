"""Tests for configuration schemas and the configuration manager."""

import json

import pytest
import yaml
from pydantic import ValidationError

from pattern_catalog.config import AppConfig, ConfigurationManager, LoggingConfig, RunnerConfig
from pattern_catalog.domain.base.exceptions import ConfigurationError


class TestSchemas:
    """Test configuration schema defaults and validation."""

    def test_defaults(self):
        config = AppConfig()

        assert config.logging.level == "WARNING"
        assert config.logging.destination == "stderr"
        assert config.runner.parallel is False
        assert config.runner.max_workers == 4
        assert config.default_format == "text"

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="LOUD")

    def test_invalid_destination(self):
        with pytest.raises(ValidationError):
            LoggingConfig(destination="stdout")

    def test_worker_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            RunnerConfig(max_workers=0)

    def test_unknown_top_level_key_rejected(self):
        with pytest.raises(ValidationError):
            AppConfig.from_dict({"providers": {}})


class TestConfigurationManager:
    """Test configuration loading."""

    def test_defaults_without_file(self):
        manager = ConfigurationManager()

        assert manager.app_config == AppConfig()

    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"runner": {"parallel": True, "max_workers": 2}}))

        manager = ConfigurationManager(str(path))

        assert manager.get_typed(RunnerConfig) == RunnerConfig(parallel=True, max_workers=2)

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"logging": {"level": "info"}, "default_format": "json"}))

        manager = ConfigurationManager(str(path))

        assert manager.get_typed(LoggingConfig).level == "INFO"
        assert manager.app_config.default_format == "json"

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("")

        assert ConfigurationManager(str(path)).app_config == AppConfig()

    def test_missing_file(self, tmp_path):
        manager = ConfigurationManager(str(tmp_path / "absent.json"))

        with pytest.raises(ConfigurationError, match="not found"):
            _ = manager.app_config

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError, match="Failed to read"):
            _ = ConfigurationManager(str(path)).app_config

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]")

        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            _ = ConfigurationManager(str(path)).app_config

    def test_schema_violation(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"runner": {"max_workers": -1}}))

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            _ = ConfigurationManager(str(path)).app_config

    def test_environment_overrides(self, tmp_path, monkeypatch):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"runner": {"parallel": False, "max_workers": 2}}))
        monkeypatch.setenv("PATTERN_CATALOG_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("PATTERN_CATALOG_PARALLEL", "yes")
        monkeypatch.setenv("PATTERN_CATALOG_MAX_WORKERS", "6")

        config = ConfigurationManager(str(path)).app_config

        assert config.logging.level == "ERROR"
        assert config.runner.parallel is True
        assert config.runner.max_workers == 6

    def test_invalid_boolean_override(self, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_PARALLEL", "sometimes")

        with pytest.raises(ConfigurationError, match="must be a boolean"):
            _ = ConfigurationManager().app_config

    def test_invalid_integer_override(self, monkeypatch):
        monkeypatch.setenv("PATTERN_CATALOG_MAX_WORKERS", "many")

        with pytest.raises(ConfigurationError, match="must be an integer"):
            _ = ConfigurationManager().app_config

    def test_reload_picks_up_changes(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"default_format": "json"}))
        manager = ConfigurationManager(str(path))
        assert manager.app_config.default_format == "json"

        path.write_text(json.dumps({"default_format": "yaml"}))
        manager.reload()

        assert manager.app_config.default_format == "yaml"

    def test_unknown_typed_section(self):
        with pytest.raises(ValueError, match="Unknown configuration type"):
            ConfigurationManager().get_typed(dict)
