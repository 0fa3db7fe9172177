"""Job status subsystem: normalizer, calculator registry, resolver, aggregator."""

from .normalize import normalize_job_type
from .domain import Status, StatusDetail
from .registry import DEFAULT_CALCULATOR_KEY, CalculatorRegistry, StatusCalculator
from .resolver import JobStatusResolver
from .aggregator import CompositeStatusAggregator
from .indicator import JobsStatusIndicator, job_status_indicator

__all__ = [
    "DEFAULT_CALCULATOR_KEY",
    "CalculatorRegistry",
    "CompositeStatusAggregator",
    "JobStatusResolver",
    "JobsStatusIndicator",
    "Status",
    "StatusCalculator",
    "StatusDetail",
    "job_status_indicator",
    "normalize_job_type",
]
