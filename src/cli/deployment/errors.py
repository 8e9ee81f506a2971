"""Deployment error types."""

from __future__ import annotations


class DeploymentError(Exception):
    """Raised when a deployment operation fails."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(DeploymentError):
    """Raised when a required setting is missing for a requested action."""


class ArtifactNotFoundError(DeploymentError):
    """Raised when the packaged chart cannot be found in the workspace."""
