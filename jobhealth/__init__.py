"""jobhealth: composite health status for configured background jobs."""

__version__ = "0.1.0"
