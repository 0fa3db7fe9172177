"""Built-in status calculators based on the most recent job runs.

Each calculator looks at the newest ``number_of_jobs`` runs of a job type and
reports ``status_on_failure`` when enough of them failed, when the job did not
run within its max age, or when a running job stopped reporting progress.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta

from ..jobs.definition import JobDefinition
from ..jobs.history import JobRun, JobRunHistory, RunState, utcnow
from .domain import Status, StatusDetail

WARNING_ON_LAST_JOB_FAILED = "warningOnLastJobFailed"
ERROR_ON_LAST_JOB_FAILED = "errorOnLastJobFailed"
WARNING_ON_LAST_JOBS_FAILED = "warningOnLastJobsFailed"
ERROR_ON_LAST_JOBS_FAILED = "errorOnLastJobsFailed"

DEFAULT_DEAD_AFTER = timedelta(minutes=5)


class LastRunsStatusCalculator:
    """Status of a job derived from its last ``number_of_jobs`` runs."""

    def __init__(
        self,
        key: str,
        history: JobRunHistory,
        number_of_jobs: int = 1,
        failures_to_trigger: int = 1,
        status_on_failure: Status = Status.WARNING,
        dead_after: timedelta = DEFAULT_DEAD_AFTER,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        if number_of_jobs < 1:
            raise ValueError("number_of_jobs must be at least 1")
        if not 1 <= failures_to_trigger <= number_of_jobs:
            raise ValueError("failures_to_trigger must be between 1 and number_of_jobs")
        self.key = key
        self.history = history
        self.number_of_jobs = number_of_jobs
        self.failures_to_trigger = failures_to_trigger
        self.status_on_failure = status_on_failure
        self.dead_after = dead_after
        self._clock = clock

    def evaluate(self, job_definition: JobDefinition) -> StatusDetail:
        runs = self.history.last_runs(job_definition.job_type, self.number_of_jobs)
        if not runs:
            return self._detail(job_definition, Status.OK, "Job didn't run yet.")

        last = runs[0]
        now = self._clock()

        if last.state is RunState.RUNNING and now - last.updated > self.dead_after:
            return self._detail(job_definition, self.status_on_failure, "Job seems to be dead.", last)

        max_age = job_definition.max_age
        if max_age is not None and now - last.started > max_age:
            return self._detail(
                job_definition, self.status_on_failure,
                f"Job didn't run in the past {_format_duration(max_age)}.", last,
            )

        failures = sum(1 for r in runs if r.state is RunState.FAILED)
        if failures >= self.failures_to_trigger:
            if self.number_of_jobs == 1:
                message = f"Last job failed: {last.message}" if last.message else "Last job failed."
            else:
                message = f"{failures} out of {len(runs)} job executions failed."
            return self._detail(job_definition, self.status_on_failure, message, last)

        if last.state is RunState.RUNNING:
            return self._detail(job_definition, Status.OK, "Job is running.", last)
        return self._detail(job_definition, Status.OK, "Last job was successful.", last)

    def _detail(
        self,
        job_definition: JobDefinition,
        status: Status,
        message: str,
        last: JobRun | None = None,
    ) -> StatusDetail:
        details = {"job_type": job_definition.job_type}
        if last is not None:
            details["last_run_state"] = last.state.value
            details["last_started"] = last.started.isoformat()
        return StatusDetail(
            name=job_definition.display_name, status=status, message=message, details=details,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self.key!r})"


def _format_duration(d: timedelta) -> str:
    seconds = int(d.total_seconds())
    if seconds % 3600 == 0:
        return f"{seconds // 3600}h"
    if seconds % 60 == 0:
        return f"{seconds // 60}min"
    return f"{seconds}s"


# ── Factories ────────────────────────────────────────────────────────────────


def warning_on_last_job_failed(history: JobRunHistory) -> LastRunsStatusCalculator:
    return LastRunsStatusCalculator(WARNING_ON_LAST_JOB_FAILED, history)


def error_on_last_job_failed(history: JobRunHistory) -> LastRunsStatusCalculator:
    return LastRunsStatusCalculator(
        ERROR_ON_LAST_JOB_FAILED, history, status_on_failure=Status.ERROR,
    )


def warning_on_last_jobs_failed(
    history: JobRunHistory, number_of_jobs: int = 10, failures_to_trigger: int = 3,
) -> LastRunsStatusCalculator:
    return LastRunsStatusCalculator(
        WARNING_ON_LAST_JOBS_FAILED, history,
        number_of_jobs=number_of_jobs, failures_to_trigger=failures_to_trigger,
    )


def error_on_last_jobs_failed(
    history: JobRunHistory, number_of_jobs: int = 10, failures_to_trigger: int = 3,
) -> LastRunsStatusCalculator:
    return LastRunsStatusCalculator(
        ERROR_ON_LAST_JOBS_FAILED, history,
        number_of_jobs=number_of_jobs, failures_to_trigger=failures_to_trigger,
        status_on_failure=Status.ERROR,
    )


def default_calculators(history: JobRunHistory) -> list[LastRunsStatusCalculator]:
    """All built-in calculators, the registry default first."""
    return [
        warning_on_last_job_failed(history),
        error_on_last_job_failed(history),
        warning_on_last_jobs_failed(history),
        error_on_last_jobs_failed(history),
    ]
