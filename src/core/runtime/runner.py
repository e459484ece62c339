"""Single-pass retention run.

Lists the matching jobs once, computes the delete-set, and applies it.
A listing failure propagates as ListingError before anything is deleted;
per-job deletion failures are recorded in the execution report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.core.engine.jobs import (
    DeletionExecutor,
    ExecutionReport,
    JobDeleter,
    JobLister,
    RetentionPlan,
    plan_retention,
)
from src.core.models.job_models import RunConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunResult:
    config: RunConfig
    plan: RetentionPlan
    report: ExecutionReport

    @property
    def exit_code(self) -> int:
        if self.config.fail_on_delete_error and self.report.has_failures:
            return 1
        return 0


def run_retention(
    run_config: RunConfig, lister: JobLister, deleter: JobDeleter
) -> RunResult:
    jobs = lister.list_jobs(run_config.namespace, run_config.label_selector)
    logger.info(
        "There are %d jobs with matching label in namespace %s",
        len(jobs),
        run_config.namespace,
    )

    plan = plan_retention(jobs, run_config.max_count)
    logger.info(
        "Retaining %d, %d candidate(s), %d selected for deletion",
        len(plan.retained),
        len(plan.candidates),
        len(plan.delete_set),
    )
    for job in plan.unstarted:
        logger.warning("Job %s has no start time, treating it as oldest", job.name)

    def _delete(name):
        deleter.delete_job(run_config.namespace, name)

    executor = DeletionExecutor(_delete)
    report = executor.execute(plan.delete_set, dry_run=run_config.dry_run)
    return RunResult(config=run_config, plan=plan, report=report)
