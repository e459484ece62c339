#!/usr/bin/env python3
"""
Job Reaper CLI
Keeps the most recent Kubernetes jobs matching a label and removes the rest
"""

import argparse
import logging
import sys

from rich.logging import RichHandler

from src.app.cli.ui import (
    ICONS,
    VERSION,
    console,
    print_error,
    print_info,
    print_run_header,
    print_run_result,
    print_success,
)
from src.configs.schema.validator import validate_run_settings
from src.core.formatting.reports import build_report
from src.core.models.errors import ClusterConfigError, ConfigValidationError, ListingError
from src.core.runtime.config_loader import SAMPLE_CONFIG, create_sample_config, get_config
from src.core.runtime.runner import run_retention
from src.providers.k8s.clients import get_batch_api
from src.providers.k8s.jobs import KubernetesJobClient

logger = logging.getLogger(__name__)


def show_version():
    """Display version information."""
    console.print(f"""
[bold cyan]Job Reaper[/bold cyan] v{VERSION}

[dim]Retention for Kubernetes batch jobs[/dim]
""")


def init_config(path=None):
    """Initialize sample configuration file."""
    config = get_config(path)

    if config.config_exists():
        print_error(f"Config file already exists at {config.get_config_path()}")
        console.print("[dim]Delete it first if you want to recreate.[/dim]")
        return False

    created = create_sample_config(config.get_config_path())
    print_success(f"Config file created at {created}")
    console.print()
    console.print(f"[cyan]{SAMPLE_CONFIG}[/cyan]")
    return True


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def setup_logging(level):
    level = str(level).upper()
    if level not in LOG_LEVELS:
        level = "WARNING"
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog="job-reaper",
        description="Job Reaper - keep only the most recent Kubernetes jobs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
{ICONS["star"]} Examples:

  # Show what would be deleted (dry run is the default)
  job-reaper --namespace batch --label app=report --max-count 5

  # Really delete, using the local kubeconfig
  job-reaper --no-in-cluster --label app=report --no-dry-run

  # Initialize config file
  job-reaper --init-config
        """,
    )

    parser.add_argument(
        "--version", "-V", action="store_true", help="Show version information"
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Create sample config file at ~/.job-reaper/config.yaml",
    )
    parser.add_argument("--config", help="Path to an alternate config file")

    parser.add_argument("--namespace", help="Kubernetes namespace (default: default)")
    parser.add_argument("--label", help="Label selector to match (default: all jobs)")
    parser.add_argument(
        "--max-count", type=int, help="Number of jobs to remain (default: 10)"
    )
    parser.add_argument(
        "--dry-run",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Only do dry run (default: on)",
    )
    parser.add_argument(
        "--in-cluster",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="In-cluster deployment (default: on)",
    )
    parser.add_argument(
        "--kubeconfig", help="Absolute path to the kubeconfig file"
    )
    parser.add_argument(
        "--fail-on-delete-error",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Exit non-zero when any job deletion fails",
    )
    parser.add_argument(
        "--output",
        choices=["rich", "text"],
        default="rich",
        help="Report style (default: rich)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        show_version()
        return 0

    if args.init_config:
        return 0 if init_config(args.config) else 1

    config = get_config(args.config)
    settings = config.merged(
        {
            "namespace": args.namespace,
            "label": args.label,
            "max_count": args.max_count,
            "dry_run": args.dry_run,
            "in_cluster": args.in_cluster,
            "kubeconfig": args.kubeconfig,
            "fail_on_delete_error": args.fail_on_delete_error,
            "log_level": args.log_level,
        }
    )
    setup_logging(settings.get("log_level") or "WARNING")
    logger.debug("Run settings: %s", settings)

    try:
        run_config = validate_run_settings(settings)
    except ConfigValidationError as exc:
        print_error(f"Invalid configuration: {exc}")
        return 2

    if args.output == "rich":
        print_run_header(run_config)

    try:
        batch_api = get_batch_api(
            in_cluster=run_config.in_cluster, kubeconfig=run_config.kubeconfig
        )
        job_client = KubernetesJobClient(batch_api)
        result = run_retention(run_config, job_client, job_client)
    except ClusterConfigError as exc:
        print_error(str(exc))
        return 1
    except ListingError as exc:
        print_error(f"Failed to list jobs: {exc}")
        print_info("Nothing was deleted.")
        return 1

    if args.output == "text":
        console.print(build_report(result), markup=False, highlight=False, soft_wrap=True)
    else:
        print_run_result(result)

    return result.exit_code


__all__ = ["main", "build_parser"]


if __name__ == "__main__":
    sys.exit(main())
