"""Retention engine exports."""

from src.core.engine.executor import DeletionExecutor, ExecutionReport
from src.core.engine.interfaces import JobDeleter, JobLister
from src.core.engine.retention import (
    RetentionPlan,
    compute_delete_set,
    plan_retention,
    sort_by_start_time,
)

__all__ = [
    "DeletionExecutor",
    "ExecutionReport",
    "JobDeleter",
    "JobLister",
    "RetentionPlan",
    "compute_delete_set",
    "plan_retention",
    "sort_by_start_time",
]
