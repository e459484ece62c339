"""Capability interfaces the retention run depends on."""

from abc import ABC, abstractmethod

from src.core.models.job_models import JobRecord


class JobLister(ABC):
    @abstractmethod
    def list_jobs(self, namespace: str, label_selector: str) -> list[JobRecord]:
        """Return the jobs matching *label_selector*.

        Raise ListingError if the jobs cannot be enumerated.
        """
        pass


class JobDeleter(ABC):
    @abstractmethod
    def delete_job(self, namespace: str, name: str) -> None:
        """Delete one job together with its dependents (foreground cascade).

        Raise JobDeletionError on failure.
        """
        pass
