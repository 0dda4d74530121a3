"""Clinica configuration management."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("table", "json")


class ConfigError(Exception):
    """Raised when configuration cannot be read or holds invalid values."""


@dataclass
class Config:
    """Clinica configuration."""

    config_path: Path = field(default_factory=lambda: Path.home() / ".clinica" / "config.yaml")
    log_level: str = "INFO"
    output_format: str = "table"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load config from defaults, then env vars, then the YAML file.

        An explicit config_path takes precedence over CLINICA_CONFIG.
        """
        config = cls()

        env_path = os.environ.get("CLINICA_CONFIG")
        if config_path:
            config.config_path = config_path
        elif env_path:
            config.config_path = Path(env_path)

        # Override from env

        env_log = os.environ.get("CLINICA_LOG_LEVEL")
        if env_log:
            config.log_level = env_log

        env_output = os.environ.get("CLINICA_OUTPUT")
        if env_output:
            config.output_format = env_output

        # Load YAML config if exists
        if config.config_path.exists():
            try:
                with open(config.config_path) as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Cannot read {config.config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"{config.config_path} must contain a mapping")
            for key in ("log_level", "output_format"):
                if key in data and data[key] is not None:
                    setattr(config, key, str(data[key]))

        config.validate()
        return config

    def validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level {self.log_level!r}, expected one of {LOG_LEVELS}")
        self.output_format = self.output_format.lower()
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Invalid output_format {self.output_format!r}, expected one of {OUTPUT_FORMATS}"
            )

    @property
    def level(self) -> int:
        return logging.getLevelName(self.log_level)

    def save(self) -> None:
        """Save current config to YAML."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "log_level": self.log_level,
            "output_format": self.output_format,
        }
        with open(self.config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
