"""Kubernetes client factory helpers."""

import logging

from kubernetes import client, config

from src.core.models.errors import ClusterConfigError

logger = logging.getLogger(__name__)


def load_cluster_config(in_cluster=True, kubeconfig=None):
    """Load credentials from the pod service account or a kubeconfig file."""
    try:
        if in_cluster:
            config.load_incluster_config()
        else:
            config.load_kube_config(config_file=kubeconfig or None)
    except (config.ConfigException, OSError) as exc:
        source = "in-cluster service account" if in_cluster else f"kubeconfig {kubeconfig}"
        raise ClusterConfigError(f"Unable to load {source}: {exc}") from exc
    logger.debug("Loaded cluster config (in_cluster=%s)", in_cluster)


def get_batch_api(in_cluster=True, kubeconfig=None):
    load_cluster_config(in_cluster=in_cluster, kubeconfig=kubeconfig)
    return client.BatchV1Api()
