"""Demonstration runner - executes demonstrations and captures their output."""

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from pattern_catalog.domain.demonstration import Category, Demonstration
from pattern_catalog.domain.execution import ExecutionResult
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.registry.demonstration_registry import DemonstrationRegistry


class DemonstrationRunner:
    """
    Application service running demonstrations from a registry.

    Every name is resolved before anything executes, so an unknown name fails
    the whole call with NotFoundError and no partial results. Once execution
    starts, each demonstration is isolated: a fault becomes an ExecutionResult
    carrying an error marker and the remaining demonstrations still run.
    """

    def __init__(
        self,
        registry: DemonstrationRegistry,
        parallel: bool = False,
        max_workers: int = 4,
        clock: Callable[[], float] = time.perf_counter,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._registry = registry
        self._parallel = parallel
        self._max_workers = max_workers
        self._clock = clock
        self._logger = get_logger(__name__)

    def run(self, names: Sequence[str]) -> List[ExecutionResult]:
        """
        Execute the named demonstrations in the given order.

        Raises:
            NotFoundError: If any name is not registered
        """
        demonstrations = [self._registry.lookup(name) for name in names]

        if self._parallel and len(demonstrations) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as executor:
                # map() yields in submission order regardless of completion order
                results = list(executor.map(self.execute, demonstrations))
        else:
            results = [self.execute(demonstration) for demonstration in demonstrations]

        failed = sum(1 for result in results if not result.succeeded)
        self._logger.info(
            "Run completed", requested=len(names), failed=failed, parallel=self._parallel
        )
        return results

    def run_all(self, category: Optional[Category] = None) -> List[ExecutionResult]:
        """Execute every registered demonstration, optionally within one category."""
        return self.run(self._registry.list(category))

    def execute(self, demonstration: Demonstration) -> ExecutionResult:
        """Execute one demonstration, converting any fault into an error marker."""
        started = self._clock()
        try:
            lines = demonstration.execute()
        except Exception as e:
            duration = max(self._clock() - started, 0.0)
            error = f"{type(e).__name__}: {e}"
            self._logger.warning(
                "Demonstration faulted", pattern=demonstration.name, error=error, exc_info=True
            )
            return ExecutionResult(name=demonstration.name, duration_seconds=duration, error=error)

        duration = max(self._clock() - started, 0.0)
        self._logger.debug(
            "Demonstration executed",
            pattern=demonstration.name,
            lines=len(lines),
            duration_seconds=duration,
        )
        return ExecutionResult(name=demonstration.name, lines=tuple(lines), duration_seconds=duration)
