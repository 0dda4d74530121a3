"""Tests for configuration loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from clinica.config import Config, ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("CLINICA_CONFIG", "CLINICA_LOG_LEVEL", "CLINICA_OUTPUT"):
        monkeypatch.delenv(var, raising=False)


class TestConfigLoad:
    """Test Config.load precedence and validation."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = Config.load(tmp_path / "missing.yaml")
        assert config.log_level == "INFO"
        assert config.output_format == "table"
        assert config.level == logging.INFO

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLINICA_LOG_LEVEL", "debug")
        monkeypatch.setenv("CLINICA_OUTPUT", "JSON")
        config = Config.load(tmp_path / "missing.yaml")
        assert config.log_level == "DEBUG"
        assert config.output_format == "json"

    def test_env_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "other.yaml"
        path.write_text(yaml.dump({"log_level": "WARNING"}))
        monkeypatch.setenv("CLINICA_CONFIG", str(path))
        config = Config.load()
        assert config.config_path == path
        assert config.log_level == "WARNING"

    def test_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"log_level": "error", "output_format": "json", "unknown": 1}))
        config = Config.load(path)
        assert config.log_level == "ERROR"
        assert config.output_format == "json"

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("")
        config = Config.load(path)
        assert config.log_level == "INFO"

    def test_invalid_log_level(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(yaml.dump({"log_level": "LOUD"}))
        with pytest.raises(ConfigError):
            Config.load(path)

    def test_invalid_output_format(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLINICA_OUTPUT", "xml")
        with pytest.raises(ConfigError):
            Config.load(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("log_level: [unclosed")
        with pytest.raises(ConfigError):
            Config.load(path)

    def test_non_mapping_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            Config.load(path)


def test_save_round_trip(config: Config) -> None:
    config.log_level = "DEBUG"
    config.output_format = "json"
    config.save()

    loaded = Config.load(config.config_path)
    assert loaded.log_level == "DEBUG"
    assert loaded.output_format == "json"
