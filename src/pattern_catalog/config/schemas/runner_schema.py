"""Runner configuration schema."""

from pydantic import BaseModel, Field


class RunnerConfig(BaseModel):
    """Demonstration runner configuration."""

    parallel: bool = Field(False, description="Execute demonstrations on a thread pool")
    max_workers: int = Field(4, ge=1, description="Thread pool size in parallel mode")
