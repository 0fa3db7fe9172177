"""Calculator registry: status calculators indexed by their configuration key."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from ..errors import ConfigurationError
from .domain import StatusDetail

if TYPE_CHECKING:
    from ..jobs.definition import JobDefinition

logger = logging.getLogger(__name__)

DEFAULT_CALCULATOR_KEY = "warningOnLastJobFailed"


class StatusCalculator(Protocol):
    """Policy that turns a job's state into a StatusDetail."""

    key: str

    def evaluate(self, job_definition: JobDefinition) -> StatusDetail: ...


class CalculatorRegistry:
    """Status calculators keyed by ``calculator.key``.

    Built once at startup and only read afterwards. Construction fails with
    ConfigurationError if no calculator is registered under the default key.
    """

    def __init__(self, calculators: Iterable[StatusCalculator]) -> None:
        self._calculators: dict[str, StatusCalculator] = {}
        for calculator in calculators:
            self.register(calculator)

        if DEFAULT_CALCULATOR_KEY not in self._calculators:
            raise ConfigurationError(
                f"No default status calculator registered under '{DEFAULT_CALCULATOR_KEY}' "
                f"(registered: {', '.join(self._calculators) or 'none'})"
            )
        logger.info(
            "Registered %d status calculators, default '%s'",
            len(self._calculators), DEFAULT_CALCULATOR_KEY,
        )

    def register(self, calculator: StatusCalculator) -> None:
        key = calculator.key
        if key in self._calculators:
            logger.warning("Duplicate status calculator key '%s', last registration wins", key)
        self._calculators[key] = calculator

    def resolve(self, key: str) -> StatusCalculator | None:
        return self._calculators.get(key)

    @property
    def default(self) -> StatusCalculator:
        return self._calculators[DEFAULT_CALCULATOR_KEY]

    @property
    def default_key(self) -> str:
        return DEFAULT_CALCULATOR_KEY

    def keys(self) -> list[str]:
        return list(self._calculators)

    def __contains__(self, key: object) -> bool:
        return key in self._calculators

    def __len__(self) -> int:
        return len(self._calculators)
