"""Exceptions raised by the job reaper."""


class ReaperError(Exception):
    """Base class for job reaper errors."""


class ClusterConfigError(ReaperError):
    """Cluster credentials or kubeconfig could not be loaded."""


class ListingError(ReaperError):
    """Jobs could not be listed. Fatal to the run."""


class JobDeletionError(ReaperError):
    """A single job could not be deleted."""

    def __init__(self, name, message):
        super().__init__(message)
        self.name = name


class ConfigValidationError(ReaperError, ValueError):
    """Run settings failed validation."""
