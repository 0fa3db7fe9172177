"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from jobhealth.jobs.definition import JobDefinition, fixed_delay_job_definition
from jobhealth.status.domain import Status, StatusDetail


@pytest.fixture
def make_calculator() -> Callable[..., MagicMock]:
    """Factory for calculator doubles returning a fixed status."""

    def _make(key: str, status: Status = Status.OK, message: str = "fine") -> MagicMock:
        calculator = MagicMock(name=key)
        calculator.key = key
        calculator.evaluate.side_effect = lambda d: StatusDetail(
            name=d.display_name, status=status, message=message,
        )
        return calculator

    return _make


@pytest.fixture
def default_calculator(make_calculator) -> MagicMock:
    return make_calculator("warningOnLastJobFailed")


@pytest.fixture
def error_calculator(make_calculator) -> MagicMock:
    return make_calculator("errorOnLastJobFailed", Status.ERROR, "Last job failed.")


@pytest.fixture
def some_job_definition() -> Callable[[str], JobDefinition]:
    def _make(job_type: str) -> JobDefinition:
        return fixed_delay_job_definition(
            job_type,
            job_type,
            "",
            timedelta(seconds=10),
            0,
            timedelta(seconds=10),
        )

    return _make
