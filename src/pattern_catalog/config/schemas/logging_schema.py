"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_DESTINATIONS = ("stderr", "file", "both")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("WARNING", description="Log level")
    destination: str = Field("stderr", description="Log destination (stderr, file, both)")
    file_path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum log file size in MB")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if level not in _LEVELS:
            raise ValueError(f"Invalid log level: {v}. Valid levels: {', '.join(_LEVELS)}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        if v not in _DESTINATIONS:
            raise ValueError(
                f"Invalid log destination: {v}. Valid destinations: {', '.join(_DESTINATIONS)}"
            )
        return v
