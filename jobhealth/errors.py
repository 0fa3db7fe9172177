"""Exceptions raised by jobhealth."""

from __future__ import annotations


class JobHealthError(Exception):
    """Base class for all jobhealth errors."""


class ConfigurationError(JobHealthError):
    """Raised at startup when the status configuration cannot be served."""
