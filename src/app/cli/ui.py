"""
Console UI components for Job Reaper.
Status badges, header panel and job tables.
"""

import importlib.metadata

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.core.formatting.reports import (
    build_header,
    format_start_time,
    job_decision,
    summarize_run,
)

# Version info
try:
    VERSION = importlib.metadata.version("job-reaper")
except importlib.metadata.PackageNotFoundError:
    VERSION = "0.0.0.dev"

# Console instance
console = Console()

ICONS = {
    "success": "✅",
    "error": "❌",
    "warning": "⚠️",
    "info": "ℹ️",
    "settings": "⚙️",
    "check": "✓",
    "cross": "✗",
    "star": "★",
}


class StatusBadge:
    """Create colored status badges."""

    @staticmethod
    def ok(text: str = "OK") -> Text:
        return Text(f" ✓ {text} ", style="bold white on green")

    @staticmethod
    def warn(text: str = "WARN") -> Text:
        return Text(f" ⚠ {text} ", style="bold black on yellow")

    @staticmethod
    def error(text: str = "ERROR") -> Text:
        return Text(f" ✗ {text} ", style="bold white on red")

    @staticmethod
    def info(text: str = "INFO") -> Text:
        return Text(f" ℹ {text} ", style="bold white on blue")

    @staticmethod
    def skip(text: str = "SKIP") -> Text:
        return Text(f" ○ {text} ", style="bold white on bright_black")

    @staticmethod
    def from_status(status: str) -> Text:
        """Create badge from status string."""
        status_lower = status.lower()
        if status_lower in ["ok", "deleted", "keep"]:
            return StatusBadge.ok(status.upper())
        elif status_lower in ["simulated", "dry run", "delete"]:
            return StatusBadge.info(status.upper())
        elif status_lower in ["failed", "error", "attention required"]:
            return StatusBadge.error(status.upper())
        elif status_lower.startswith("skip"):
            return StatusBadge.skip("SKIP")
        else:
            return StatusBadge.warn(status.upper())


def print_success(message: str):
    console.print(f"[bold green]{ICONS['success']} {message}[/bold green]")


def print_info(message: str):
    console.print(f"[cyan]{ICONS['info']} {message}[/cyan]")


def print_error(message: str):
    console.print(f"[bold red]{ICONS['error']} ERROR[/bold red]: {message}")


def print_run_header(config):
    """Print the run parameters panel."""
    header_content = Text()
    for i, line in enumerate(build_header(config)):
        label, _, value = line.partition(": ")
        if i:
            header_content.append("\n")
        header_content.append(f"{label:<16}", style="dim")
        header_content.append(value or "-", style="bold white")

    console.print(
        Panel(
            header_content,
            border_style="cyan",
            box=box.ROUNDED,
            title="[bold]Job Reaper[/bold]",
            title_align="left",
            padding=(1, 2),
        )
    )


def create_jobs_table(plan) -> Table:
    table = Table(
        title=f"[bold]{len(plan.ordered)} matching job(s)[/bold]",
        box=box.ROUNDED,
        border_style="cyan",
        header_style="bold cyan",
        show_header=True,
        padding=(0, 1),
    )
    table.add_column("Job", style="bold", min_width=20)
    table.add_column("Succeeded", justify="right")
    table.add_column("Start time")
    table.add_column("Decision", justify="center")

    for job in plan.ordered:
        start = format_start_time(job)
        if not job.has_started:
            start = f"[yellow]{start}[/yellow]"
        table.add_row(
            job.name,
            str(job.succeeded),
            start,
            StatusBadge.from_status(job_decision(job, plan)),
        )
    return table


def print_outcome_row(outcome):
    output = Text()
    output.append("  ")
    output.append_text(StatusBadge.from_status(outcome.status))
    output.append("  ")
    output.append(outcome.name, style="bold")
    if outcome.error:
        output.append(f"  {outcome.error}", style="dim")
    console.print(output)


def print_run_result(result):
    """Render a finished run: jobs table, outcomes, summary."""
    console.print(create_jobs_table(result.plan))
    console.print()

    if result.report.outcomes:
        console.print("[bold cyan]Selected for deletion[/bold cyan]")
        console.print("[dim]" + "─" * 50 + "[/dim]")
        for outcome in result.report.outcomes:
            print_outcome_row(outcome)
    else:
        print_info("No jobs selected for deletion.")

    status, detail = summarize_run(result)
    console.print()
    console.print(StatusBadge.from_status(status), detail)
    console.print("Done.")
