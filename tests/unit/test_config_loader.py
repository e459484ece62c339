import pytest

from src.configs.schema.validator import validate_run_settings
from src.core.models.errors import ConfigValidationError
from src.core.runtime import config_loader
from src.core.runtime.config_loader import DEFAULT_SETTINGS, Config


def test_missing_config_file_uses_defaults(tmp_path):
    cfg = Config(tmp_path / "missing.yaml")

    assert cfg.settings == DEFAULT_SETTINGS
    assert cfg.config_exists() is False


def test_config_file_overrides_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "defaults:\n  namespace: batch\n  max_count: 3\n  dry_run: false\n  bogus: 1\n",
        encoding="utf-8",
    )

    settings = Config(path).settings

    assert settings["namespace"] == "batch"
    assert settings["max_count"] == 3
    assert settings["dry_run"] is False
    assert "bogus" not in settings
    assert settings["label"] == ""


def test_unparseable_config_falls_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("defaults: [unclosed\n", encoding="utf-8")

    assert Config(path).settings == DEFAULT_SETTINGS


def test_merged_prefers_explicit_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("defaults:\n  namespace: batch\n  label: app=a\n", encoding="utf-8")

    merged = Config(path).merged({"namespace": "other", "label": None})

    assert merged["namespace"] == "other"
    assert merged["label"] == "app=a"


def test_create_sample_config_round_trips(tmp_path):
    path = config_loader.create_sample_config(tmp_path / "nested" / "config.yaml")

    settings = Config(path).settings
    run_config = validate_run_settings(settings)

    assert run_config.max_count == 10
    assert run_config.dry_run is True


def test_validate_run_settings_builds_run_config():
    run_config = validate_run_settings(
        dict(DEFAULT_SETTINGS, namespace="batch", label="app=x", max_count=0, dry_run="no")
    )

    assert run_config.namespace == "batch"
    assert run_config.label_selector == "app=x"
    assert run_config.max_count == 0
    assert run_config.dry_run is False


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_count": -1},
        {"max_count": "5"},
        {"max_count": True},
        {"namespace": ""},
        {"dry_run": "maybe"},
        {"in_cluster": False, "kubeconfig": ""},
    ],
)
def test_validate_run_settings_rejects_bad_values(overrides):
    with pytest.raises(ConfigValidationError):
        validate_run_settings(dict(DEFAULT_SETTINGS, **overrides))


def _no_home():
    raise RuntimeError("Could not determine home directory.")


def test_config_path_falls_back_when_home_is_unknown(monkeypatch, tmp_path):
    monkeypatch.setattr(config_loader.Path, "home", staticmethod(_no_home))
    monkeypatch.setattr(config_loader, "_config", None)
    monkeypatch.chdir(tmp_path)

    cfg = config_loader.get_config()

    assert cfg.get_config_path() == config_loader.Path(".job-reaper") / "config.yaml"
    assert cfg.settings["namespace"] == "default"
    created = config_loader.create_sample_config()
    assert (tmp_path / created).exists()


def test_validate_run_settings_missing_flags_use_safe_defaults():
    run_config = validate_run_settings({"namespace": "batch", "max_count": 1})

    assert run_config.dry_run is True
    assert run_config.in_cluster is True
    assert run_config.fail_on_delete_error is False
