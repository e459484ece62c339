from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


def _default_kubeconfig() -> str:
    try:
        return str(Path.home() / ".kube" / "config")
    except RuntimeError:
        return ""


@dataclass(frozen=True)
class JobRecord:
    name: str
    start_time: Optional[datetime] = None
    succeeded: int = 0

    def __post_init__(self):
        # Naive start times are taken as UTC so they order against aware ones.
        if self.start_time is not None and self.start_time.tzinfo is None:
            object.__setattr__(
                self, "start_time", self.start_time.replace(tzinfo=timezone.utc)
            )

    @property
    def has_started(self) -> bool:
        return self.start_time is not None

    @property
    def has_succeeded(self) -> bool:
        return self.succeeded >= 1

    @classmethod
    def from_k8s_job(cls, job) -> "JobRecord":
        """Build a record from a kubernetes ``V1Job``.

        A job that has not started yet has no ``status.start_time``; a job
        with no completions reports ``status.succeeded`` as None.
        """
        status = job.status
        start_time = getattr(status, "start_time", None) if status else None
        succeeded = getattr(status, "succeeded", None) if status else None
        return cls(
            name=job.metadata.name,
            start_time=start_time,
            succeeded=max(int(succeeded or 0), 0),
        )


@dataclass(frozen=True)
class RunConfig:
    namespace: str = "default"
    label_selector: str = ""
    max_count: int = 10
    dry_run: bool = True
    in_cluster: bool = True
    kubeconfig: str = field(default_factory=_default_kubeconfig)
    fail_on_delete_error: bool = False


@dataclass(frozen=True)
class JobOutcome:
    name: str
    status: str  # simulated | deleted | failed
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"
