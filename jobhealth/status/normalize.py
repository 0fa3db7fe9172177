"""Job type normalization."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[\s\-_]+")


def normalize_job_type(raw: str | None) -> str:
    """Canonical lookup key for a free-form job type label.

    "Some Test Job", "some-test-job" and "SOME TEST JOB" all map to
    "some_test_job". Blank input maps to "".
    """
    if not raw:
        return ""
    return _SEPARATORS.sub("_", raw.strip().lower())
