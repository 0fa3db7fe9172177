from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from pydantic_settings import BaseSettings

from .status.normalize import normalize_job_type


class Settings(BaseSettings):
    """Central configuration loaded from environment / .env file."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    management_context_path: str = "/internal"

    # Job definitions file (absolute or relative to CWD)
    jobs_file: str = "jobs.yaml"

    # Job type label → calculator key, e.g.
    # JOBS_STATUS_CALCULATOR='{"Import Products": "errorOnLastJobFailed"}'
    jobs_status_calculator: dict[str, str] = {}

    # Logging
    log_level: str = "INFO"

    def job_status_config(self, extra_overrides: Mapping[str, str] | None = None) -> JobStatusConfig:
        """Immutable status config; entries from settings win over ``extra_overrides``."""
        raw: dict[str, str] = dict(extra_overrides or {})
        raw.update(self.jobs_status_calculator)
        return JobStatusConfig.from_raw(raw)


@dataclass(frozen=True)
class JobStatusConfig:
    """Calculator overrides keyed by normalized job type."""

    calculator_overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "calculator_overrides", MappingProxyType(dict(self.calculator_overrides)),
        )

    @classmethod
    def from_raw(cls, raw: Mapping[str, str]) -> JobStatusConfig:
        """Normalize the job type labels of raw configuration pairs."""
        overrides: dict[str, str] = {}
        for label, calculator_key in raw.items():
            key = normalize_job_type(label)
            if key:
                overrides[key] = calculator_key.strip()
        return cls(calculator_overrides=overrides)

    def override_for(self, job_type: str) -> str | None:
        return self.calculator_overrides.get(normalize_job_type(job_type))


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""
    return Settings()
