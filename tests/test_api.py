"""Tests for the FastAPI routes."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest
import yaml
from fastapi.testclient import TestClient

from jobhealth.api.server import create_app
from jobhealth.config import Settings
from jobhealth.errors import ConfigurationError
from jobhealth.jobs.definition import JobDefinition
from jobhealth.jobs.history import InMemoryJobRunHistory, JobRun, RunState
from jobhealth.jobs.provider import StaticJobDefinitionProvider


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(jobs_file=str(tmp_path / "jobs.yaml"), jobs_status_calculator={})


@pytest.fixture
def history() -> InMemoryJobRunHistory:
    return InMemoryJobRunHistory()


@pytest.fixture
def client(settings, history):
    provider = StaticJobDefinitionProvider([
        JobDefinition(job_type="Import Products", job_name="Product import"),
        JobDefinition(job_type="Cleanup"),
    ])
    settings.jobs_status_calculator = {"import-products": "errorOnLastJobFailed"}
    app = create_app(settings=settings, provider=provider, history=history)
    with TestClient(app) as c:
        yield c


class TestStatusRoutes:
    def test_jobs_status_ok(self, client) -> None:
        resp = client.get("/internal/status/jobs")
        assert resp.status_code == 200
        data = resp.json()
        assert data["name"] == "Jobs"
        assert data["status"] == "OK"
        assert data["message"] == "All 2 jobs are OK."
        assert set(data["details"]) == {"Product import", "Cleanup"}

    def test_jobs_status_uses_override(self, client, history) -> None:
        history.record(JobRun(
            job_type="Import Products", started=datetime.now(timezone.utc),
            state=RunState.FAILED, stopped=datetime.now(timezone.utc), message="feed unavailable",
        ))
        data = client.get("/internal/status/jobs").json()
        assert data["status"] == "ERROR"
        assert data["message"] == "1 of 2 jobs not OK. ERROR: Product import."

    def test_single_job(self, client) -> None:
        resp = client.get("/internal/status/jobs/import products")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Product import"

    def test_single_job_not_found(self, client) -> None:
        resp = client.get("/internal/status/jobs/unknown")
        assert resp.status_code == 404

    def test_job_definitions(self, client) -> None:
        data = client.get("/internal/jobs/definitions").json()
        calculators = {j["job_type"]: j["calculator"] for j in data["jobs"]}
        assert calculators == {
            "Import Products": "errorOnLastJobFailed",
            "Cleanup": "warningOnLastJobFailed",
        }
        assert "warningOnLastJobsFailed" in data["calculators"]


class TestServerWiring:
    def test_no_jobs_file(self, settings) -> None:
        with TestClient(create_app(settings=settings)) as c:
            data = c.get("/internal/status/jobs").json()
        assert data["status"] == "OK"
        assert data["message"] == "No job definitions configured in application."

    def test_jobs_file_overrides(self, settings, tmp_path: Path) -> None:
        Path(settings.jobs_file).write_text(yaml.dump({
            "jobs": [{"type": "Some Test Job"}],
            "status_calculator": {"soMe-TeSt job": "errorOnLastJobFailed"},
        }))
        with TestClient(create_app(settings=settings)) as c:
            data = c.get("/internal/jobs/definitions").json()
        assert data["jobs"][0]["calculator"] == "errorOnLastJobFailed"

    def test_numeric_job_name(self, settings) -> None:
        Path(settings.jobs_file).write_text("jobs:\n  - type: Import\n    name: 2024\n")
        with TestClient(create_app(settings=settings)) as c:
            resp = c.get("/internal/status/jobs")
            definitions = c.get("/internal/jobs/definitions").json()
        assert resp.status_code == 200
        assert set(resp.json()["details"]) == {"2024"}
        assert definitions["jobs"][0]["job_name"] == "2024"

    def test_custom_context_path(self, settings) -> None:
        settings.management_context_path = "/someInternalPath/"
        with TestClient(create_app(settings=settings)) as c:
            assert c.get("/someInternalPath/status/jobs").status_code == 200

    def test_missing_default_calculator_prevents_startup(self, settings, make_calculator) -> None:
        app = create_app(settings=settings, calculators=[make_calculator("errorOnLastJobFailed")])
        with pytest.raises(ConfigurationError):
            with TestClient(app):
                pass
