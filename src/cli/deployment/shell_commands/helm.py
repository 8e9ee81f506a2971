"""Helm command abstractions.

This module provides commands for Helm chart packaging.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class HelmCommands:
    """Helm-related shell commands."""

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize Helm commands.

        Args:
            runner: Command runner for executing shell commands
        """
        self._runner = runner

    def package(self, chart_path: Path, destination: Path) -> CommandResult:
        """Package a chart directory into a versioned chart archive.

        The archive is named by helm's own convention
        (``<chart name>-<chart version>.tgz``).

        Args:
            chart_path: Path to the Helm chart source directory
            destination: Directory the archive is written to

        Returns:
            CommandResult with packaging status

        Example:
            >>> helm.package(Path("App-chart"), Path("build/helm-chart"))
        """
        return self._runner.run(
            ["helm", "package", "-d", str(destination), str(chart_path)]
        )
