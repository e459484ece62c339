"""Config schema validation helpers."""

from src.core.models.errors import ConfigValidationError
from src.core.models.job_models import RunConfig

_BOOL_KEYS = ("dry_run", "in_cluster", "fail_on_delete_error")


def _as_bool(key, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "yes", "1"):
        return True
    if isinstance(value, str) and value.strip().lower() in ("false", "no", "0"):
        return False
    raise ConfigValidationError(f"{key} must be a boolean, got {value!r}")


def validate_run_settings(raw):
    """Validate a merged settings mapping and return a RunConfig."""
    if not isinstance(raw, dict):
        raise ConfigValidationError("settings must be an object")

    namespace = raw.get("namespace")
    if not namespace or not isinstance(namespace, str):
        raise ConfigValidationError("namespace is required")

    label = raw.get("label") or ""
    if not isinstance(label, str):
        raise ConfigValidationError("label must be a string")

    max_count = raw.get("max_count")
    if isinstance(max_count, bool) or not isinstance(max_count, int):
        raise ConfigValidationError(f"max_count must be an integer, got {max_count!r}")
    if max_count < 0:
        raise ConfigValidationError(f"max_count must be non-negative, got {max_count}")

    defaults = RunConfig()
    flags = {
        key: _as_bool(key, raw.get(key, getattr(defaults, key))) for key in _BOOL_KEYS
    }

    kubeconfig = raw.get("kubeconfig") or ""
    if not flags["in_cluster"] and not kubeconfig:
        raise ConfigValidationError("kubeconfig is required when not running in-cluster")

    return RunConfig(
        namespace=namespace,
        label_selector=label,
        max_count=max_count,
        kubeconfig=str(kubeconfig),
        **flags,
    )
