"""Retention policy: decide which jobs to remove.

Jobs are ordered oldest first by start time, the newest ``keep`` jobs are
always retained, and of the remaining older jobs only the ones that have
succeeded at least once are eligible for deletion. Everything here is pure;
the input sequence is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from src.core.models.job_models import JobRecord


def _start_time_key(job: JobRecord):
    # Jobs without a start time sort as the earliest possible.
    if job.start_time is None:
        return (0, 0)
    return (1, job.start_time)


def sort_by_start_time(jobs: Sequence[JobRecord]) -> list[JobRecord]:
    """Return a new list of jobs ordered oldest first.

    The sort is stable, so ties keep their listing order.
    """
    return sorted(jobs, key=_start_time_key)


@dataclass(frozen=True)
class RetentionPlan:
    ordered: tuple
    retained: tuple
    candidates: tuple
    delete_set: tuple

    @property
    def skipped(self) -> tuple:
        """Candidates left in place because they have not succeeded."""
        return tuple(job for job in self.candidates if not job.has_succeeded)

    @property
    def unstarted(self) -> tuple:
        return tuple(job for job in self.ordered if not job.has_started)


def plan_retention(jobs: Sequence[JobRecord], keep: int) -> RetentionPlan:
    if keep < 0:
        raise ValueError(f"keep must be non-negative, got {keep}")

    ordered = sort_by_start_time(jobs)
    excess = max(len(ordered) - keep, 0)
    candidates = ordered[:excess]
    retained = ordered[excess:]
    delete_set = [job for job in candidates if job.has_succeeded]

    return RetentionPlan(
        ordered=tuple(ordered),
        retained=tuple(retained),
        candidates=tuple(candidates),
        delete_set=tuple(delete_set),
    )


def compute_delete_set(jobs: Sequence[JobRecord], keep: int) -> list[JobRecord]:
    """Return the jobs to delete, oldest first."""
    return list(plan_retention(jobs, keep).delete_set)
