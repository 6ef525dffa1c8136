"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .logging_schema import LoggingConfig
from .runner_schema import RunnerConfig

OUTPUT_FORMATS = ("text", "json", "yaml", "table")


class AppConfig(BaseModel):
    """Application configuration."""

    model_config = ConfigDict(extra="forbid")

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
    default_format: str = Field("text", description="Default CLI output format")

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate output format."""
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Invalid output format: {v}. Valid formats: {', '.join(OUTPUT_FORMATS)}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create configuration from a plain dictionary."""
        return cls.model_validate(data)


def validate_config(config: Dict[str, Any]) -> AppConfig:
    """Validate a configuration dictionary."""
    return AppConfig.from_dict(config)
