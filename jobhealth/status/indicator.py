"""Jobs status indicator: explicit wiring of provider, resolver and aggregator."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .aggregator import CompositeStatusAggregator
from .domain import StatusDetail
from .normalize import normalize_job_type
from .registry import CalculatorRegistry, StatusCalculator
from .resolver import JobStatusResolver

if TYPE_CHECKING:
    from ..config import JobStatusConfig
    from ..jobs.definition import JobDefinition
    from ..jobs.provider import JobDefinitionProvider


@dataclass(frozen=True)
class JobStatusReport:
    """One job's status together with the calculator that produced it."""

    definition: JobDefinition
    calculator_key: str
    detail: StatusDetail


class JobsStatusIndicator:
    """Computes the composite jobs status on every call."""

    def __init__(
        self,
        provider: JobDefinitionProvider,
        resolver: JobStatusResolver,
        aggregator: CompositeStatusAggregator | None = None,
    ) -> None:
        self.provider = provider
        self.resolver = resolver
        self.aggregator = aggregator or CompositeStatusAggregator()

    def status_detail(self) -> StatusDetail:
        return self.status_report()[0]

    def status_report(self) -> tuple[StatusDetail, list[JobStatusReport]]:
        """Composite status plus the per-job reports it was built from.

        Calculators are not consulted when no jobs are configured.
        """
        definitions = self.provider.get_job_definitions()
        if not definitions:
            return self.aggregator.no_jobs(), []

        reports = []
        for definition in definitions:
            calculator, detail = self.resolver.resolve_with_calculator(definition)
            reports.append(JobStatusReport(definition, calculator.key, detail))
        composite = self.aggregator.aggregate(definitions, [r.detail for r in reports])
        return composite, reports

    def job_status_detail(self, job_type: str) -> StatusDetail | None:
        """Status of the first job whose normalized type matches, else None."""
        wanted = normalize_job_type(job_type)
        for definition in self.provider.get_job_definitions():
            if normalize_job_type(definition.job_type) == wanted:
                return self.resolver.resolve(definition)
        return None


def job_status_indicator(
    provider: JobDefinitionProvider,
    calculators: Iterable[StatusCalculator],
    config: JobStatusConfig,
) -> JobsStatusIndicator:
    """Build the jobs status indicator.

    Raises ConfigurationError when no calculator is registered under the
    default key ``warningOnLastJobFailed``.
    """
    registry = CalculatorRegistry(calculators)
    return JobsStatusIndicator(provider, JobStatusResolver(registry, config))
