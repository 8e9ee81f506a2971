"""Deployment module for building, publishing and packaging the application.

The package is organized into:
- shell_commands: Abstractions for docker/helm command execution
- workspace: Build workspace preparation and inspection
- image_builder: Docker image build, registry login and push
- chart_publisher: Helm chart packaging and upload
- pipeline: Ordered, fail-fast execution of the requested actions
"""

from .errors import ArtifactNotFoundError, ConfigurationError, DeploymentError
from .pipeline import DeploymentPipeline

__all__ = [
    "ArtifactNotFoundError",
    "ConfigurationError",
    "DeploymentError",
    "DeploymentPipeline",
]
