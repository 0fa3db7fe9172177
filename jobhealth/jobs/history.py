"""Read access to past executions of a job type.

Runs are recorded by whatever executes the jobs; jobhealth only reads them.
The in-memory history is used for wiring and tests.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol

from ..status.normalize import normalize_job_type


class RunState(str, Enum):
    RUNNING = "RUNNING"
    OK = "OK"
    FAILED = "FAILED"


@dataclass(frozen=True)
class JobRun:
    """A single execution of a job."""

    job_type: str
    started: datetime
    state: RunState
    stopped: datetime | None = None
    last_updated: datetime | None = None
    message: str = ""

    @property
    def updated(self) -> datetime:
        return self.last_updated or self.stopped or self.started


class JobRunHistory(Protocol):
    def last_runs(self, job_type: str, limit: int) -> list[JobRun]:
        """Most recent runs of ``job_type``, newest first."""
        ...


class InMemoryJobRunHistory:
    """Thread-safe job run history held in memory."""

    def __init__(self) -> None:
        self._runs: dict[str, list[JobRun]] = {}
        self._lock = threading.Lock()

    def record(self, run: JobRun) -> None:
        with self._lock:
            self._runs.setdefault(normalize_job_type(run.job_type), []).append(run)

    def last_runs(self, job_type: str, limit: int) -> list[JobRun]:
        with self._lock:
            runs = list(self._runs.get(normalize_job_type(job_type), []))
        runs.sort(key=lambda r: r.started, reverse=True)
        return runs[:limit]

    def clear(self) -> None:
        with self._lock:
            self._runs.clear()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
