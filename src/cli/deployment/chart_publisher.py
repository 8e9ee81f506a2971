"""Helm chart packaging and upload.

Packs the application chart into the workspace and uploads the resulting
archive to an HTTP chart repository with an authenticated PUT.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import requests
import yaml
from loguru import logger
from rich.markup import escape
from requests.auth import HTTPBasicAuth

from .errors import ConfigurationError, DeploymentError

if TYPE_CHECKING:
    from rich.console import Console

    from src.cli.config import DriverConfig

    from .constants import DeploymentPaths
    from .shell_commands import ShellCommands
    from .workspace import Workspace


def chart_upload_url(repo_url: str, artifact: Path) -> str:
    """Build the upload URL for an artifact, e.g. ``<repo>/app-0.1.0.tgz``."""
    return f"{repo_url.rstrip('/')}/{artifact.name}"


class ChartPublisher:
    """Packages and uploads the Helm chart.

    Attributes:
        commands: Shell command executor
        console: Rich console for output
        paths: Deployment path resolver
        workspace: Build workspace receiving the packaged chart
    """

    def __init__(
        self,
        commands: ShellCommands,
        console: Console,
        paths: DeploymentPaths,
        workspace: Workspace,
    ) -> None:
        self.commands = commands
        self.console = console
        self.paths = paths
        self.workspace = workspace

    def read_chart_metadata(self) -> dict[str, Any]:
        """Load Chart.yaml from the chart source directory.

        Raises:
            DeploymentError: If Chart.yaml is missing or is not a YAML mapping
        """
        chart_file = self.paths.chart_file
        try:
            with chart_file.open(encoding="utf-8") as handle:
                metadata = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as e:
            raise DeploymentError(
                f"Packing helm chart {self.paths.chart_source} failed",
                details=f"Could not read {chart_file}: {e}",
            ) from e

        if not isinstance(metadata, dict):
            raise DeploymentError(
                f"Packing helm chart {self.paths.chart_source} failed",
                details=f"{chart_file} does not contain a chart definition",
            )
        return metadata

    def pack(self) -> Path:
        """Package the chart into a clean output directory.

        Returns:
            Directory holding the packaged chart

        Raises:
            DeploymentError: If the chart is unreadable or ``helm package`` fails
        """
        self.console.print("\n[bold cyan]📦 Packing Helm chart[/bold cyan]")

        metadata = self.read_chart_metadata()
        self.console.print(
            f"[dim]Chart: {escape(str(metadata.get('name', '?')))} "
            f"version {escape(str(metadata.get('version', '?')))}[/dim]"
        )

        self.workspace.reset_chart_output()
        result = self.commands.helm.package(
            self.paths.chart_source, self.workspace.chart_output
        )
        if not result.success:
            raise DeploymentError(
                f"Packing helm chart {self.paths.chart_source} failed",
                details=result.details,
            )
        if result.stdout.strip():
            self.console.print(f"[dim]{escape(result.stdout.strip())}[/dim]")
        return self.workspace.chart_output

    def push(self, config: DriverConfig) -> None:
        """Upload the packaged chart to the chart repository.

        The chart is never packed implicitly; run the pack step first.

        Raises:
            ArtifactNotFoundError: If no packaged chart exists
            ConfigurationError: If the repository address or credentials are empty
            DeploymentError: If the upload fails
        """
        self.console.print("\n[bold cyan]📤 Pushing Helm chart[/bold cyan]")

        artifact = self.workspace.find_chart_artifact()
        self.console.print(f"Helm chart: {escape(str(artifact))}")

        if not config.helm_repo:
            raise ConfigurationError(
                "Helm repository not set (HELM_REPO)",
                details="Set it in the environment or pass --helm_repo.",
            )
        if not config.helm_usr or not config.helm_psw:
            raise ConfigurationError(
                "Helm repository credentials not set (HELM_USR and HELM_PSW)",
                details="Set them in the environment or pass "
                "--helm_usr and --helm_psw.",
            )

        url = chart_upload_url(config.helm_repo, artifact)
        logger.debug(f"Uploading {artifact} to {url}")
        try:
            with artifact.open("rb") as handle:
                response = requests.put(
                    url,
                    data=handle,
                    auth=HTTPBasicAuth(config.helm_usr, config.helm_psw),
                )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise DeploymentError(
                "Uploading helm chart failed", details=f"PUT {url}: {e}"
            ) from e

        self.console.print(f"[green]✓ Uploaded {escape(artifact.name)} to {escape(url)}[/green]")
