"""FastAPI server exposing the jobs status."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..config import Settings, get_settings
from ..jobs.history import InMemoryJobRunHistory, JobRunHistory
from ..jobs.provider import JobDefinitionProvider, YamlJobDefinitionProvider
from ..status.calculators import default_calculators
from ..status.indicator import JobsStatusIndicator, job_status_indicator
from ..status.registry import StatusCalculator
from .status_routes import status_router

logger = logging.getLogger(__name__)


def build_indicator(
    settings: Settings,
    provider: JobDefinitionProvider | None = None,
    history: JobRunHistory | None = None,
    calculators: Iterable[StatusCalculator] | None = None,
) -> JobsStatusIndicator:
    """Wire provider, calculators and config into a status indicator.

    Raises ConfigurationError when the default calculator is missing.
    """
    extra_overrides: dict[str, str] = {}
    if provider is None:
        yaml_provider = YamlJobDefinitionProvider(settings.jobs_file)
        extra_overrides = yaml_provider.calculator_overrides()
        provider = yaml_provider
    if calculators is None:
        calculators = default_calculators(history or InMemoryJobRunHistory())

    config = settings.job_status_config(extra_overrides)
    if config.calculator_overrides:
        logger.info("Status calculator overrides: %s", dict(config.calculator_overrides))
    return job_status_indicator(provider, calculators, config)


def create_app(
    settings: Settings | None = None,
    provider: JobDefinitionProvider | None = None,
    history: JobRunHistory | None = None,
    calculators: Iterable[StatusCalculator] | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    if calculators is not None:
        calculators = list(calculators)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the status indicator on startup; a missing default aborts startup."""
        app.state.jobs_status_indicator = build_indicator(settings, provider, history, calculators)
        logger.info("Jobs status available at %s/status/jobs", settings.management_context_path)
        yield

    app = FastAPI(
        title="jobhealth",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(status_router, prefix=settings.management_context_path.rstrip("/"))
    return app
