"""Entry point for jobhealth."""

from __future__ import annotations

import argparse
import logging
import sys

import uvicorn
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .api.server import build_indicator
from .config import get_settings
from .errors import ConfigurationError
from .status.domain import Status, StatusDetail

console = Console()

STATUS_STYLES = {Status.OK: "green", Status.WARNING: "yellow", Status.ERROR: "bold red"}


def run_server() -> None:
    """Start the FastAPI server."""
    settings = get_settings()
    console.print(Panel("Starting jobhealth API server", style="bold green"))
    uvicorn.run(
        "jobhealth.api.server:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )


def run_status() -> int:
    """Evaluate all configured jobs once and print the result."""
    settings = get_settings()
    try:
        indicator = build_indicator(settings)
    except ConfigurationError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {e}")
        return 2

    composite, reports = indicator.status_report()

    if reports:
        table = Table(title="Jobs")
        table.add_column("Job")
        table.add_column("Calculator")
        table.add_column("Status")
        table.add_column("Message")
        for report in reports:
            table.add_row(
                report.detail.name,
                report.calculator_key,
                _styled(report.detail),
                report.detail.message,
            )
        console.print(table)

    console.print(Panel(composite.message, title=f"{composite.name}: {_styled(composite)}"))
    return 1 if composite.status is Status.ERROR else 0


def _styled(detail: StatusDetail) -> str:
    style = STATUS_STYLES[detail.status]
    return f"[{style}]{detail.status.value}[/{style}]"


def main() -> None:
    parser = argparse.ArgumentParser(description="Composite health status for background jobs")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("serve", help="Start the API server")
    sub.add_parser("status", help="Print the current jobs status")

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    if args.command == "serve":
        run_server()
    elif args.command == "status":
        sys.exit(run_status())
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
