"""Job definition providers: where the set of known jobs comes from.

The YAML provider reads jobs.yaml:

    jobs:
      - type: Import Products
        name: Product import
        fixed_delay_seconds: 600
        max_age_seconds: 3600
    status_calculator:
      import-products: errorOnLastJobFailed
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import timedelta
from pathlib import Path
from typing import Any, Protocol

import yaml

from .definition import JobDefinition

logger = logging.getLogger(__name__)


class JobDefinitionProvider(Protocol):
    def get_job_definitions(self) -> list[JobDefinition]: ...


class StaticJobDefinitionProvider:
    """Serves a fixed list of job definitions."""

    def __init__(self, definitions: Iterable[JobDefinition] = ()) -> None:
        self._definitions = list(definitions)

    def get_job_definitions(self) -> list[JobDefinition]:
        return list(self._definitions)


class YamlJobDefinitionProvider:
    """Loads and caches job definitions from a YAML file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._definitions: list[JobDefinition] = []
        self._overrides: dict[str, str] = {}
        self._loaded = False

    def load(self, force: bool = False) -> list[JobDefinition]:
        """Parse the jobs file and return its job definitions."""
        if self._loaded and not force:
            return self._definitions

        self._definitions = []
        self._overrides = {}
        if not self._path.exists():
            logger.warning("Jobs file not found: %s", self._path)
            self._loaded = True
            return self._definitions

        try:
            raw = yaml.safe_load(self._path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            logger.error("Failed to parse %s: %s", self._path, e)
            self._loaded = True
            return self._definitions

        if not isinstance(raw, dict):
            logger.warning("Ignoring %s: expected a mapping at the top level", self._path)
            self._loaded = True
            return self._definitions

        for entry in raw.get("jobs") or []:
            try:
                self._definitions.append(_parse_job(entry))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed job entry: %s", e)

        raw_overrides = raw.get("status_calculator") or {}
        if isinstance(raw_overrides, dict):
            self._overrides = {str(k): str(v) for k, v in raw_overrides.items()}
        else:
            logger.warning("Ignoring status_calculator in %s: expected a mapping", self._path)

        self._loaded = True
        logger.info("Loaded %d job definitions from %s", len(self._definitions), self._path)
        return self._definitions

    def get_job_definitions(self) -> list[JobDefinition]:
        return list(self.load())

    def calculator_overrides(self) -> dict[str, str]:
        """Raw job type → calculator key pairs declared in the jobs file."""
        self.load()
        return dict(self._overrides)

    def reload(self) -> list[JobDefinition]:
        """Force reload from disk."""
        return self.load(force=True)


# ── Parsers ──────────────────────────────────────────────────────────────────


def _parse_job(raw: dict[str, Any]) -> JobDefinition:
    job_type = str(raw["type"]).strip()
    if not job_type:
        raise ValueError("job 'type' must not be blank")
    return JobDefinition(
        job_type=job_type,
        job_name=_text(raw.get("name")),
        description=_text(raw.get("description")),
        cron=_text(raw.get("cron")) or None,
        fixed_delay=_seconds(raw.get("fixed_delay_seconds")),
        restarts=int(raw.get("restarts", 0)),
        max_age=_seconds(raw.get("max_age_seconds")),
    )


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def _seconds(value: Any) -> timedelta | None:
    if value is None:
        return None
    return timedelta(seconds=float(value))
