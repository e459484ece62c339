"""
Plain-text report generation for a retention run
"""

from src.core.engine.executor import DELETED, FAILED, SIMULATED


def format_start_time(job):
    if job.start_time is None:
        return "not started"
    return job.start_time.strftime("%Y-%m-%d %H:%M:%S %Z").strip()


def job_decision(job, plan):
    """Return the decision label for one listed job."""
    if job in plan.delete_set:
        return "delete"
    if job in plan.retained:
        return "keep"
    return "skip (not succeeded)"


def build_header(config):
    return [
        f"In-cluster: {config.in_cluster}",
        f"Namespace: {config.namespace}",
        f"Label selector: {config.label_selector}",
        f"Dry run: {config.dry_run}",
        f"Max count: {config.max_count}",
    ]


def summarize_run(result):
    report = result.report
    if report.dry_run:
        return "DRY RUN", report.summary()
    if report.has_failures:
        return "ATTENTION REQUIRED", report.summary()
    return "OK", report.summary()


def build_report(result):
    config = result.config
    plan = result.plan
    report = result.report

    lines = build_header(config)
    lines.append("")
    lines.append(f"There are {len(plan.ordered)} jobs with matching label in the cluster.")
    lines.append("")
    for job in plan.ordered:
        lines.append(
            f"Job Name: {job.name}, Succeeded: {job.succeeded}, "
            f"Start time: {format_start_time(job)}, Decision: {job_decision(job, plan)}"
        )

    if plan.unstarted:
        lines.append("")
        lines.append(f"Jobs without a start time: {len(plan.unstarted)}")
        for job in plan.unstarted:
            lines.append(f"  - {job.name}")

    lines.append("")
    lines.append(f"Selected for deletion: {len(plan.delete_set)}")
    for outcome in report.outcomes:
        if outcome.status == SIMULATED:
            lines.append(f"  - {outcome.name}: would delete (dry run)")
        elif outcome.status == DELETED:
            lines.append(f"  - {outcome.name}: deleted")
        elif outcome.status == FAILED:
            lines.append(f"  - {outcome.name}: FAILED ({outcome.error})")

    status, detail = summarize_run(result)
    lines.append("")
    lines.append(f"{status}: {detail}")
    lines.append("Done.")
    return "\n".join(lines)
