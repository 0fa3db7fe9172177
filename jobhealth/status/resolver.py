"""Job status resolver: picks the calculator for each job and evaluates it."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from .domain import Status, StatusDetail
from .registry import CalculatorRegistry, StatusCalculator

if TYPE_CHECKING:
    from ..config import JobStatusConfig
    from ..jobs.definition import JobDefinition

logger = logging.getLogger(__name__)


class JobStatusResolver:
    """Evaluates every job definition with its configured status calculator.

    The calculator for a job is the override configured for its normalized
    job type when that key is registered, otherwise the registry default.
    """

    def __init__(self, registry: CalculatorRegistry, config: JobStatusConfig) -> None:
        self.registry = registry
        self.config = config

    def calculator_for(self, job_definition: JobDefinition) -> StatusCalculator:
        override_key = self.config.override_for(job_definition.job_type)
        if override_key is None:
            return self.registry.default

        calculator = self.registry.resolve(override_key)
        if calculator is None:
            logger.warning(
                "Status calculator '%s' configured for job type '%s' is not registered, using '%s'",
                override_key, job_definition.job_type, self.registry.default_key,
            )
            return self.registry.default
        return calculator

    def resolve(self, job_definition: JobDefinition) -> StatusDetail:
        return self.resolve_with_calculator(job_definition)[1]

    def resolve_with_calculator(
        self, job_definition: JobDefinition,
    ) -> tuple[StatusCalculator, StatusDetail]:
        """Selected calculator and the status it produced for ``job_definition``."""
        calculator = self.calculator_for(job_definition)
        return calculator, self._evaluate(calculator, job_definition)

    def _evaluate(self, calculator: StatusCalculator, job_definition: JobDefinition) -> StatusDetail:
        try:
            return calculator.evaluate(job_definition)
        except Exception as e:
            logger.exception(
                "Status calculator '%s' failed for job type '%s'",
                calculator.key, job_definition.job_type,
            )
            return StatusDetail(
                name=job_definition.display_name,
                status=Status.ERROR,
                message=f"Status calculation failed: {type(e).__name__}: {e}",
                details={"job_type": job_definition.job_type, "calculator": calculator.key},
            )

    def resolve_all(self, job_definitions: Iterable[JobDefinition]) -> list[StatusDetail]:
        """Individual statuses in job definition order."""
        return [self.resolve(d) for d in job_definitions]
