"""Shared fixtures for the deployment driver tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.cli.deployment.constants import DeploymentPaths
from src.cli.deployment.shell_commands import CommandResult

DRIVER_ENV_VARS = (
    "DOCKER_REG",
    "DOCKER_USR",
    "DOCKER_PSW",
    "DOCKER_REPO",
    "DOCKER_TAG",
    "HELM_REPO",
    "HELM_REG",
    "HELM_USR",
    "HELM_PSW",
    "DEPLOY_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_driver_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's deployment settings out of every test."""
    for name in DRIVER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a project tree with application sources and a chart."""
    app_dir = tmp_path / "SimpleApp"
    app_dir.mkdir()
    (app_dir / "Dockerfile").write_text("FROM nginx:alpine\n")
    (app_dir / "index.html").write_text("<h1>hello</h1>\n")
    (app_dir / "static").mkdir()
    (app_dir / "static" / "app.css").write_text("body {}\n")

    chart_dir = tmp_path / "App-chart"
    chart_dir.mkdir()
    (chart_dir / "Chart.yaml").write_text(
        "apiVersion: v2\nname: simpleapp\nversion: 0.1.0\n"
    )
    return tmp_path


@pytest.fixture
def paths(project_root: Path) -> DeploymentPaths:
    return DeploymentPaths(project_root)


@pytest.fixture
def mock_commands() -> MagicMock:
    """Create a mock shell commands instance where every command succeeds."""
    commands = MagicMock()
    ok = CommandResult(success=True)
    commands.docker.build_image.return_value = ok
    commands.docker.login.return_value = ok
    commands.docker.push_image.return_value = ok
    commands.helm.package.return_value = ok
    return commands


@pytest.fixture
def mock_console() -> MagicMock:
    """Create a mock Rich console."""
    return MagicMock()
