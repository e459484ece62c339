"""Job listing and deletion on top of ``BatchV1Api``."""

import logging

from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError as TransportError

from src.core.engine.interfaces import JobDeleter, JobLister
from src.core.models.errors import JobDeletionError, ListingError
from src.core.models.job_models import JobRecord
from src.providers.k8s.errors import classify_k8s_error

logger = logging.getLogger(__name__)

FOREGROUND = "Foreground"


class KubernetesJobClient(JobLister, JobDeleter):
    def __init__(self, batch_api):
        self.batch_api = batch_api

    def list_jobs(self, namespace, label_selector):
        try:
            resp = self.batch_api.list_namespaced_job(
                namespace=namespace, label_selector=label_selector
            )
        except (ApiException, TransportError) as exc:
            info = classify_k8s_error(exc, namespace)
            raise ListingError(info["error"]) from exc

        jobs = [JobRecord.from_k8s_job(item) for item in resp.items or []]
        logger.debug("Listed %d jobs in %s", len(jobs), namespace)
        return jobs

    def delete_job(self, namespace, name):
        try:
            self.batch_api.delete_namespaced_job(
                name=name,
                namespace=namespace,
                propagation_policy=FOREGROUND,
            )
        except (ApiException, TransportError) as exc:
            info = classify_k8s_error(exc, namespace)
            raise JobDeletionError(name, info["error"]) from exc
