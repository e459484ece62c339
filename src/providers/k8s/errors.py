"""Kubernetes API error detection utilities.

Turns ``ApiException`` and transport failures into short, actionable
messages so the report can show why a job was not listed or deleted
instead of a raw response body.
"""

from __future__ import annotations

import logging

from kubernetes.client.exceptions import ApiException
from urllib3.exceptions import HTTPError as TransportError

logger = logging.getLogger(__name__)

_AUTH_STATUSES = frozenset({401, 403})


def is_auth_error(exc: BaseException) -> bool:
    """Return True if *exc* is an authentication / authorization failure."""
    return isinstance(exc, ApiException) and exc.status in _AUTH_STATUSES


def friendly_api_message(exc: BaseException, namespace: str = "") -> str:
    if isinstance(exc, ApiException):
        if exc.status == 401:
            return "Unauthorized: cluster credentials are missing or expired."
        if exc.status == 403:
            return (
                f"Forbidden: service account cannot manage jobs in namespace "
                f"'{namespace}'. Check RBAC for batch/jobs list and delete."
            )
        if exc.status == 404:
            return "Not found: the job no longer exists."
        return f"API error {exc.status}: {exc.reason}"

    if isinstance(exc, TransportError):
        return f"Cannot reach the Kubernetes API server: {exc}"

    return str(exc)


def classify_k8s_error(exc: BaseException, namespace: str = "") -> dict:
    """Classify an exception and return a structured error dict.

    Returns a dict with keys:
        error_type: 'auth' | 'k8s_api' | 'network' | 'unexpected'
        error: human-readable message
        is_auth_error: bool
    """
    if is_auth_error(exc):
        error_type = "auth"
    elif isinstance(exc, ApiException):
        error_type = "k8s_api"
    elif isinstance(exc, TransportError):
        error_type = "network"
    else:
        error_type = "unexpected"

    return {
        "error_type": error_type,
        "error": friendly_api_message(exc, namespace),
        "is_auth_error": error_type == "auth",
    }
