"""Execution result - captured output of running one demonstration once."""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ExecutionResult(BaseModel):
    """Output lines, timing and fault marker for one demonstration run."""

    model_config = ConfigDict(frozen=True)

    name: str
    lines: Tuple[str, ...] = ()
    duration_seconds: float = Field(0.0, ge=0.0)
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """Check whether the demonstration ran without a fault."""
        return self.error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "lines": list(self.lines),
            "duration_seconds": round(self.duration_seconds, 6),
            "error": self.error,
        }
