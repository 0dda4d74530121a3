"""Shared test fixtures for Clinica."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from clinica.auth.permissions import PermissionChecker
from clinica.config import Config


@pytest.fixture
def checker() -> PermissionChecker:
    return PermissionChecker()


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(config_path=tmp_path / "config.yaml")


@pytest.fixture
def runner(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[CliRunner]:
    for var in ("CLINICA_LOG_LEVEL", "CLINICA_OUTPUT"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("CLINICA_CONFIG", str(tmp_path / "config.yaml"))
    yield CliRunner()

    # The CLI binds a stream handler to the runner's stderr
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
