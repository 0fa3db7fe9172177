"""Tests for Status and StatusDetail."""

from __future__ import annotations

import pytest

from jobhealth.status.domain import Status, StatusDetail


class TestStatus:
    def test_severity_order(self) -> None:
        assert Status.OK.severity < Status.WARNING.severity < Status.ERROR.severity

    @pytest.mark.parametrize(
        ("statuses", "expected"),
        [
            ([Status.OK, Status.ERROR], Status.ERROR),
            ([Status.WARNING, Status.OK], Status.WARNING),
            ([Status.WARNING, Status.ERROR, Status.OK], Status.ERROR),
            ([Status.OK, Status.OK], Status.OK),
            ([], Status.OK),
        ],
    )
    def test_most_severe(self, statuses, expected) -> None:
        assert Status.most_severe(statuses) is expected

    def test_str_value(self) -> None:
        assert Status("WARNING") is Status.WARNING


class TestStatusDetail:
    def test_immutable(self) -> None:
        d = StatusDetail(name="Jobs", status=Status.OK, message="ok")
        with pytest.raises(AttributeError):
            d.status = Status.ERROR  # type: ignore[misc]

    def test_details_are_read_only(self) -> None:
        source = {"a": "1"}
        d = StatusDetail(name="x", status=Status.OK, message="", details=source)
        source["b"] = "2"
        assert dict(d.details) == {"a": "1"}
        with pytest.raises(TypeError):
            d.details["c"] = "3"  # type: ignore[index]

    def test_to_dict(self) -> None:
        d = StatusDetail(name="x", status=Status.WARNING, message="hm", details={"k": "v"})
        assert d.to_dict() == {
            "name": "x", "status": "WARNING", "message": "hm", "details": {"k": "v"},
        }
