import logging
from dataclasses import dataclass, field

from src.core.models.job_models import JobOutcome

logger = logging.getLogger(__name__)

SIMULATED = "simulated"
DELETED = "deleted"
FAILED = "failed"


@dataclass
class ExecutionReport:
    dry_run: bool
    outcomes: list = field(default_factory=list)

    def _with_status(self, status):
        return [o for o in self.outcomes if o.status == status]

    @property
    def simulated(self):
        return self._with_status(SIMULATED)

    @property
    def deleted(self):
        return self._with_status(DELETED)

    @property
    def failed(self):
        return self._with_status(FAILED)

    @property
    def has_failures(self) -> bool:
        return any(not o.ok for o in self.outcomes)

    def summary(self) -> str:
        if self.dry_run:
            return (
                f"Dry run: {len(self.simulated)} job(s) would be deleted, "
                "no action taken."
            )
        return (
            f"Executed {len(self.outcomes)} deletion(s): "
            f"{len(self.deleted)} deleted, {len(self.failed)} failed."
        )


class DeletionExecutor:
    def __init__(self, delete_fn):
        self.delete_fn = delete_fn

    def execute(self, delete_set, dry_run):
        report = ExecutionReport(dry_run=dry_run)

        for job in delete_set:
            if dry_run:
                logger.info("Dry run is enabled, not deleting job %s", job.name)
                report.outcomes.append(JobOutcome(job.name, SIMULATED))
                continue

            logger.info("Deleting job %s", job.name)
            try:
                self.delete_fn(job.name)
            except Exception as exc:
                logger.warning("Failed to delete job %s: %s", job.name, exc)
                report.outcomes.append(JobOutcome(job.name, FAILED, str(exc)))
            else:
                report.outcomes.append(JobOutcome(job.name, DELETED))

        return report
