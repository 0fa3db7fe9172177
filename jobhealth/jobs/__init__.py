"""Job definitions, providers and run history."""

from .definition import (
    JobDefinition,
    cron_job_definition,
    fixed_delay_job_definition,
    manually_triggerable_job_definition,
)
from .provider import JobDefinitionProvider, StaticJobDefinitionProvider, YamlJobDefinitionProvider
from .history import InMemoryJobRunHistory, JobRun, JobRunHistory, RunState
