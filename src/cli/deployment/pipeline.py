"""Deployment pipeline.

Runs the requested actions in a fixed order, stopping at the first failure:

1. Clean the workspace
2. Build the image            (--build)
3. Log in and push the image  (--push)
4. Pack the Helm chart        (--pack_helm)
5. Upload the Helm chart      (--push_helm)

Nothing is rolled back when a later step fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from .chart_publisher import ChartPublisher
from .image_builder import ImageBuilder
from .workspace import Workspace

if TYPE_CHECKING:
    from rich.console import Console

    from src.cli.config import DriverConfig
    from src.cli.context import CLIContext


class DeploymentPipeline:
    """Sequential executor for the image and chart actions."""

    def __init__(
        self,
        workspace: Workspace,
        image_builder: ImageBuilder,
        chart_publisher: ChartPublisher,
        console: Console,
    ) -> None:
        self.workspace = workspace
        self.image_builder = image_builder
        self.chart_publisher = chart_publisher
        self.console = console

    @classmethod
    def from_context(cls, ctx: CLIContext) -> DeploymentPipeline:
        """Wire a pipeline from the CLI dependency container."""
        console = ctx.console.console
        workspace = Workspace(ctx.paths, console, ctx.constants)
        return cls(
            workspace=workspace,
            image_builder=ImageBuilder(ctx.commands, console, workspace),
            chart_publisher=ChartPublisher(ctx.commands, console, ctx.paths, workspace),
            console=console,
        )

    def print_summary(self, config: DriverConfig) -> None:
        """Print the effective settings. Passwords are never shown."""
        table = Table(show_header=False, box=None)
        table.add_column(style="bold")
        table.add_column()
        table.add_row("DOCKER_REG:", Text(config.registry))
        table.add_row("DOCKER_USR:", Text(config.docker_usr))
        table.add_row("DOCKER_REPO:", Text(config.repository))
        table.add_row("DOCKER_TAG:", Text(config.tag))
        table.add_row("HELM_REPO:", Text(config.helm_repo))
        table.add_row("HELM_USR:", Text(config.helm_usr))
        self.console.print(table)

    def run(self, config: DriverConfig) -> None:
        """Execute the actions requested in ``config``.

        Raises:
            DeploymentError: On the first failing step
        """
        self.console.print("\n[bold]Running[/bold]")
        self.print_summary(config)

        self.workspace.clean()

        if config.build:
            self.image_builder.build(config)
        if config.push:
            self.image_builder.push(config)

        if config.pack_helm:
            self.chart_publisher.pack()
        if config.push_helm:
            self.chart_publisher.push(config)
