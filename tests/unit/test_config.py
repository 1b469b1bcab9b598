"""Unit tests for config.py"""

import pytest

from matter.config import load_config
from matter.core.models import ExtractorConfig


def test_load_config_defaults():
    """Settings defaults are used when no matter.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.toml is True
    assert settings.yaml_alternate is True
    assert settings.require_trailing_newline is False
    assert settings.output_format == "text"
    assert settings.log_level == "warning"


def test_load_config_reads_matter_yaml(tmp_path):
    """matter.yaml in the working directory is applied."""
    (tmp_path / "matter.yaml").write_text("toml: false\noutput_format: json\n")
    settings = load_config()
    assert settings.toml is False
    assert settings.output_format == "json"


def test_load_config_env_overrides_matter_yaml(tmp_path, monkeypatch):
    """MATTER_TOML takes precedence over matter.yaml."""
    (tmp_path / "matter.yaml").write_text("toml: false\n")
    monkeypatch.setenv("MATTER_TOML", "true")
    assert load_config().toml is True


def test_load_config_env_coerces_bool(monkeypatch):
    """MATTER_REQUIRE_TRAILING_NEWLINE env var is coerced to bool."""
    monkeypatch.setenv("MATTER_REQUIRE_TRAILING_NEWLINE", "1")
    assert load_config().require_trailing_newline is True


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MATTER_YAML_ALTERNATE", "true")
    settings = load_config(overrides={"yaml_alternate": False})
    assert settings.yaml_alternate is False


def test_load_config_none_override_ignored(monkeypatch):
    monkeypatch.setenv("MATTER_LOG_LEVEL", "debug")
    assert load_config(overrides={"log_level": None}).log_level == "debug"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when matter.yaml contains invalid YAML."""
    (tmp_path / "matter.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid matter.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "matter.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_invalid_value(monkeypatch):
    """Out-of-range values surface as ValueError, not a pydantic error."""
    monkeypatch.setenv("MATTER_OUTPUT_FORMAT", "xml")
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config()


def test_extractor_config_from_settings():
    settings = load_config(overrides={"toml": False, "require_trailing_newline": True})
    assert settings.extractor_config() == ExtractorConfig(
        toml=False, yaml_alternate=True, require_trailing_newline=True,
    )
