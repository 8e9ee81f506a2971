"""Deployment constants and configuration.

This module centralizes the magic strings, paths, and environment defaults
used throughout the deployment process.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DeploymentConstants:
    """Constants for image and chart deployment.

    All attributes are class-level and immutable.
    """

    # Project structure
    APP_SOURCE_DIR: str = "SimpleApp"
    CHART_SOURCE_DIR: str = "App-chart"
    BUILD_DIR: str = "build"
    CHART_OUTPUT_DIR: str = "helm-chart"
    CHART_FILE: str = "Chart.yaml"

    # `helm package` names archives <name>-<version>.tgz
    CHART_ARTIFACT_PATTERN: str = "*.tgz"

    # Environment variable defaults, applied when a variable is unset or empty
    DEFAULT_REGISTRY: str = "registry.hub.docker.com"
    DEFAULT_DOCKER_USR: str = "USR"
    DEFAULT_DOCKER_PSW: str = "PWD"
    DEFAULT_REPOSITORY: str = "REPO"
    DEFAULT_TAG: str = "TAG"
    DEFAULT_HELM_REPO: str = "REG"
    DEFAULT_HELM_USR: str = "admin"
    DEFAULT_HELM_PSW: str = "password"

    # Logging
    LOG_LEVEL_ENV: str = "DEPLOY_LOG_LEVEL"
    DEFAULT_LOG_LEVEL: str = "WARNING"


class DeploymentPaths:
    """Path resolver for deployment-related directories and files.

    This class constructs and provides access to all paths needed during
    deployment, derived from the project root.
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize deployment paths.

        Args:
            project_root: Path to the project root directory
        """
        self.project_root = project_root
        self._constants = DeploymentConstants()

        self.app_source = project_root / self._constants.APP_SOURCE_DIR
        self.chart_source = project_root / self._constants.CHART_SOURCE_DIR
        self.build = project_root / self._constants.BUILD_DIR
        self.chart_output = self.build / self._constants.CHART_OUTPUT_DIR

    @property
    def chart_file(self) -> Path:
        """Get path to the chart's Chart.yaml."""
        return self.chart_source / self._constants.CHART_FILE

    @property
    def env_file(self) -> Path:
        """Get path to .env file."""
        return self.project_root / ".env"
