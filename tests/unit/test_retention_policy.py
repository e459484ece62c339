from datetime import datetime, timedelta, timezone

import pytest

from src.core.engine.retention import (
    compute_delete_set,
    plan_retention,
    sort_by_start_time,
)
from src.core.models.job_models import JobRecord

_T0 = datetime(2024, 5, 1, 8, 0, tzinfo=timezone.utc)


def _job(name, minutes=None, succeeded=1):
    start = _T0 + timedelta(minutes=minutes) if minutes is not None else None
    return JobRecord(name=name, start_time=start, succeeded=succeeded)


def _names(jobs):
    return [job.name for job in jobs]


def test_keeps_most_recent_and_deletes_oldest():
    jobs = [_job(f"job-{i}", minutes=i) for i in range(1, 6)]

    assert _names(compute_delete_set(jobs, 3)) == ["job-1", "job-2"]


def test_fewer_jobs_than_retention_count_deletes_nothing():
    jobs = [_job(f"job-{i}", minutes=i) for i in range(1, 6)]

    assert compute_delete_set(jobs, 10) == []


def test_keep_zero_deletes_all_succeeded_oldest_first():
    jobs = [_job("c", minutes=3), _job("a", minutes=1), _job("b", minutes=2)]

    assert _names(compute_delete_set(jobs, 0)) == ["a", "b", "c"]


def test_unsucceeded_candidates_are_left_in_place():
    jobs = [
        _job("oldest-running", minutes=1, succeeded=0),
        _job("old-done", minutes=2),
        _job("new-1", minutes=3),
        _job("new-2", minutes=4),
    ]

    plan = plan_retention(jobs, 2)

    assert _names(plan.delete_set) == ["old-done"]
    assert _names(plan.skipped) == ["oldest-running"]
    assert _names(plan.retained) == ["new-1", "new-2"]


def test_recent_jobs_are_retained_even_when_not_succeeded():
    jobs = [_job("old", minutes=1), _job("failed-recent", minutes=2, succeeded=0)]

    plan = plan_retention(jobs, 1)

    assert _names(plan.retained) == ["failed-recent"]
    assert _names(plan.delete_set) == ["old"]


def test_empty_listing_yields_empty_delete_set():
    assert compute_delete_set([], 0) == []
    assert compute_delete_set([], 5) == []


def test_negative_keep_is_rejected():
    with pytest.raises(ValueError):
        compute_delete_set([_job("a", minutes=1)], -1)


def test_sort_is_stable_for_equal_start_times():
    jobs = [_job("b", minutes=5), _job("a", minutes=5), _job("c", minutes=1)]

    assert _names(sort_by_start_time(jobs)) == ["c", "b", "a"]


def test_missing_start_time_sorts_first_without_raising():
    jobs = [
        _job("started", minutes=1),
        _job("pending-1", succeeded=0),
        _job("pending-2", succeeded=0),
    ]

    plan = plan_retention(jobs, 1)

    assert _names(plan.ordered) == ["pending-1", "pending-2", "started"]
    assert _names(plan.unstarted) == ["pending-1", "pending-2"]
    assert plan.delete_set == ()


def test_input_listing_is_not_mutated():
    jobs = [_job("b", minutes=2), _job("a", minutes=1)]
    snapshot = list(jobs)

    compute_delete_set(jobs, 0)

    assert jobs == snapshot


def test_recomputing_gives_same_result():
    jobs = [_job(f"job-{i}", minutes=(i * 7) % 5, succeeded=i % 2) for i in range(8)]

    assert compute_delete_set(jobs, 3) == compute_delete_set(jobs, 3)


@pytest.mark.parametrize("keep", [0, 1, 3, 6, 20])
def test_delete_set_bounds(keep):
    jobs = [
        _job("a", minutes=4),
        _job("b", minutes=1, succeeded=0),
        _job("c", minutes=6),
        _job("d"),
        _job("e", minutes=2),
        _job("f", minutes=3, succeeded=2),
    ]

    plan = plan_retention(jobs, keep)
    most_recent = _names(plan.ordered[len(jobs) - min(keep, len(jobs)):])

    assert len(plan.delete_set) <= max(len(jobs) - keep, 0)
    assert not set(_names(plan.delete_set)) & set(most_recent)
    assert all(job.succeeded >= 1 for job in plan.delete_set)


def test_naive_and_aware_start_times_sort_together():
    jobs = [
        JobRecord("aware", _T0 + timedelta(hours=1), 1),
        JobRecord("naive", datetime(2024, 5, 1, 8, 30), 1),
    ]

    assert _names(compute_delete_set(jobs, 0)) == ["naive", "aware"]
    assert jobs[1].start_time.tzinfo is timezone.utc
