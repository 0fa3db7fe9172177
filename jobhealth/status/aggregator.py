"""Folds individual job statuses into the composite "Jobs" status."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import TYPE_CHECKING

from .domain import Status, StatusDetail

if TYPE_CHECKING:
    from ..jobs.definition import JobDefinition

COMPOSITE_NAME = "Jobs"
NO_JOBS_MESSAGE = "No job definitions configured in application."


class CompositeStatusAggregator:
    """Reduces individual job statuses to the composite "Jobs" status.

    The composite status is the most severe individual status. The message
    names the jobs that are not OK, ERROR first, each group in job order.
    Jobs sharing a name are told apart by their job type.
    """

    def __init__(self, name: str = COMPOSITE_NAME) -> None:
        self.name = name

    def no_jobs(self) -> StatusDetail:
        return StatusDetail(name=self.name, status=Status.OK, message=NO_JOBS_MESSAGE)

    def aggregate(
        self,
        job_definitions: Sequence[JobDefinition],
        statuses: Sequence[StatusDetail],
    ) -> StatusDetail:
        if not job_definitions:
            return self.no_jobs()

        status = Status.most_severe(s.status for s in statuses)
        labels = _labels(job_definitions, statuses)
        return StatusDetail(
            name=self.name,
            status=status,
            message=_summarize(labels, statuses),
            details={
                label: f"{s.status.value}: {s.message}" for label, s in zip(labels, statuses)
            },
        )


def _labels(job_definitions: Sequence[JobDefinition], statuses: Sequence[StatusDetail]) -> list[str]:
    """One unique label per job: its name, qualified by job type where names collide."""
    counts = Counter(s.name for s in statuses)
    labels = [
        f"{s.name} ({d.job_type})" if counts[s.name] > 1 else s.name
        for d, s in zip(job_definitions, statuses)
    ]
    seen: Counter[str] = Counter()
    unique = []
    for label in labels:
        seen[label] += 1
        unique.append(label if seen[label] == 1 else f"{label} #{seen[label]}")
    return unique


def _summarize(labels: Sequence[str], statuses: Sequence[StatusDetail]) -> str:
    failing = [(label, s) for label, s in zip(labels, statuses) if s.status is not Status.OK]
    if not failing:
        return f"All {len(statuses)} jobs are OK."

    parts = [f"{len(failing)} of {len(statuses)} jobs not OK."]
    for level in (Status.ERROR, Status.WARNING):
        names = [label for label, s in failing if s.status is level]
        if names:
            parts.append(f"{level.value}: {', '.join(names)}.")
    return " ".join(parts)
