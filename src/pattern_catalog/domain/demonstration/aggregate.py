"""Demonstration aggregate - one executable design pattern example."""

from typing import Callable, Iterable, List

from pydantic import BaseModel, ConfigDict, field_validator

from pattern_catalog.domain.base.exceptions import DemonstrationFault
from pattern_catalog.domain.demonstration.value_objects import Category, PatternName

DemonstrationBody = Callable[[], Iterable[str]]


class Demonstration(BaseModel):
    """
    An executable, deterministic example illustrating one design pattern.

    The body is invoked with no arguments and yields the observable events of
    the example as ordered output lines. Demonstrations are immutable once
    constructed; every call to execute() builds its collaborators afresh, so
    repeated executions produce identical output.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    category: Category
    body: DemonstrationBody
    summary: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the pattern name."""
        return PatternName(v).value

    def execute(self) -> List[str]:
        """Run the example and return its output lines."""
        output = self.body()
        if isinstance(output, (str, bytes)):
            raise DemonstrationFault(
                self.name,
                f"body returned a bare {type(output).__name__}, expected a sequence of lines",
            )
        lines = list(output)
        for index, line in enumerate(lines):
            if not isinstance(line, str):
                raise DemonstrationFault(
                    self.name, f"line {index} is {type(line).__name__}, expected str"
                )
        return lines

    def describe(self) -> dict:
        """Get a serializable description of this demonstration."""
        return {
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
        }
