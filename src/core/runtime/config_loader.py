"""
External configuration loader for Job Reaper.
Loads config from ~/.job-reaper/config.yaml with fallback to built-in defaults.
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from src.core.models.job_models import RunConfig

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".job-reaper"
CONFIG_FILE_NAME = "config.yaml"


def default_config_file() -> Path:
    """Return ~/.job-reaper/config.yaml, or a cwd-relative path when there is no home."""
    try:
        home = Path.home()
    except RuntimeError:
        return Path(CONFIG_DIR_NAME) / CONFIG_FILE_NAME
    return home / CONFIG_DIR_NAME / CONFIG_FILE_NAME


_RUN_DEFAULTS = RunConfig()

# Built-in default settings, mirroring the CLI flag defaults
DEFAULT_SETTINGS = {
    "namespace": _RUN_DEFAULTS.namespace,
    "label": _RUN_DEFAULTS.label_selector,
    "max_count": _RUN_DEFAULTS.max_count,
    "dry_run": _RUN_DEFAULTS.dry_run,
    "in_cluster": _RUN_DEFAULTS.in_cluster,
    "kubeconfig": _RUN_DEFAULTS.kubeconfig,
    "fail_on_delete_error": _RUN_DEFAULTS.fail_on_delete_error,
    "log_level": "WARNING",
}


class Config:
    """Configuration manager with external file support."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_config_file()
        self._settings: dict[str, Any] = {}
        self._loaded = False

    def _load(self):
        """Load configuration from external file or use defaults."""
        if self._loaded:
            return

        self._settings = DEFAULT_SETTINGS.copy()

        if self.path.exists():
            try:
                with open(self.path, "r", encoding="utf-8") as f:
                    external_config = yaml.safe_load(f) or {}

                defaults = external_config.get("defaults")
                if isinstance(defaults, dict):
                    self._settings.update(
                        {k: v for k, v in defaults.items() if k in DEFAULT_SETTINGS}
                    )
                    unknown = sorted(set(defaults) - set(DEFAULT_SETTINGS))
                    if unknown:
                        logger.warning(
                            "Ignoring unknown config keys in %s: %s",
                            self.path,
                            ", ".join(unknown),
                        )

            except yaml.YAMLError as e:
                logger.warning("Failed to parse config file %s: %s", self.path, e)
            except (OSError, AttributeError) as e:
                logger.warning("Failed to load config file %s: %s", self.path, e)

        self._loaded = True

    @property
    def settings(self) -> dict[str, Any]:
        """Get settings (lazy loaded)."""
        self._load()
        return self._settings

    def merged(self, overrides: dict[str, Any]) -> dict[str, Any]:
        """Return settings with non-None *overrides* applied on top."""
        merged = dict(self.settings)
        merged.update({k: v for k, v in overrides.items() if v is not None})
        return merged

    def config_exists(self) -> bool:
        """Check if external config file exists."""
        return self.path.exists()

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return self.path


SAMPLE_CONFIG = """# Job Reaper Configuration
# This file is loaded from ~/.job-reaper/config.yaml
#
# Command-line flags override the values below.

defaults:
  namespace: default
  # Label selector of the jobs to manage, empty matches every job
  label: ""
  # Number of most recent jobs to keep
  max_count: 10
  # Only report what would be deleted
  dry_run: true
  in_cluster: true
  # kubeconfig: /home/me/.kube/config
  # Exit non-zero when any deletion fails
  fail_on_delete_error: false
  log_level: WARNING
"""


def create_sample_config(path: Optional[Path] = None) -> Path:
    """Create a sample configuration file."""
    target = Path(path) if path else default_config_file()
    target.parent.mkdir(parents=True, exist_ok=True)

    with open(target, "w", encoding="utf-8") as f:
        f.write(SAMPLE_CONFIG)

    return target


# Global config instance (singleton), created on first use
_config: Optional[Config] = None


def get_config(path: Optional[Path] = None) -> Config:
    """Get the global config instance, or a fresh one for *path*."""
    if path is not None:
        return Config(path)
    global _config
    if _config is None:
        _config = Config()
    return _config
