"""Static descriptions of schedulable jobs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class JobDefinition:
    """Static description of a schedulable job (type and cadence).

    Only ``job_type`` matters for status resolution; ``max_age`` is read by
    the built-in calculators, everything else is descriptive.
    """

    job_type: str
    job_name: str = ""
    description: str = ""
    cron: str | None = None
    fixed_delay: timedelta | None = None
    restarts: int = 0
    max_age: timedelta | None = None

    @property
    def display_name(self) -> str:
        return self.job_name or self.job_type


def fixed_delay_job_definition(
    job_type: str,
    job_name: str,
    description: str,
    fixed_delay: timedelta,
    restarts: int = 0,
    max_age: timedelta | None = None,
) -> JobDefinition:
    """Job triggered again ``fixed_delay`` after the previous run finished."""
    return JobDefinition(
        job_type=job_type,
        job_name=job_name,
        description=description,
        fixed_delay=fixed_delay,
        restarts=restarts,
        max_age=max_age,
    )


def cron_job_definition(
    job_type: str,
    job_name: str,
    description: str,
    cron: str,
    restarts: int = 0,
    max_age: timedelta | None = None,
) -> JobDefinition:
    """Job triggered by a cron expression."""
    return JobDefinition(
        job_type=job_type,
        job_name=job_name,
        description=description,
        cron=cron,
        restarts=restarts,
        max_age=max_age,
    )


def manually_triggerable_job_definition(
    job_type: str,
    job_name: str,
    description: str,
    restarts: int = 0,
    max_age: timedelta | None = None,
) -> JobDefinition:
    """Job without a schedule, only started on demand."""
    return JobDefinition(
        job_type=job_type,
        job_name=job_name,
        description=description,
        restarts=restarts,
        max_age=max_age,
    )
