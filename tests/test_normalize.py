"""Tests for job type normalization."""

from __future__ import annotations

import pytest

from jobhealth.status.normalize import normalize_job_type


class TestNormalizeJobType:
    @pytest.mark.parametrize(
        "raw",
        ["Some Test Job", "some-test-job", "SOME TEST JOB", "soMe-TeSt job", "  some_test   job "],
    )
    def test_equivalent_labels(self, raw: str) -> None:
        assert normalize_job_type(raw) == "some_test_job"

    def test_mixed_separators_collapse(self) -> None:
        assert normalize_job_type("a - b__c") == "a_b_c"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_is_empty(self, raw) -> None:
        assert normalize_job_type(raw) == ""

    def test_idempotent(self) -> None:
        once = normalize_job_type("Import Products")
        assert normalize_job_type(once) == once
