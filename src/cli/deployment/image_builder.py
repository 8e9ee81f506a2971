"""Docker image building and publishing.

This module handles the Docker side of a deployment run:
- Building the application image from the prepared workspace
- Logging in to the target registry
- Pushing the image to the registry
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from .errors import ConfigurationError, DeploymentError

if TYPE_CHECKING:
    from rich.console import Console

    from src.cli.config import DriverConfig

    from .shell_commands import ShellCommands
    from .workspace import Workspace


class ImageBuilder:
    """Builds and pushes the application image.

    Attributes:
        commands: Shell command executor
        console: Rich console for output
        workspace: Build workspace holding the image build inputs
    """

    def __init__(
        self,
        commands: ShellCommands,
        console: Console,
        workspace: Workspace,
    ) -> None:
        self.commands = commands
        self.console = console
        self.workspace = workspace

    def build(self, config: DriverConfig) -> None:
        """Copy the application sources into the workspace and build the image.

        Args:
            config: Run configuration

        Raises:
            DeploymentError: If preparing files or the docker build fails
        """
        self.console.print(
            f"\n[bold cyan]🔨 Building {config.image_name}[/bold cyan]"
        )
        self.workspace.prepare_build_files()

        self.console.print("\n[bold]Building Docker image[/bold]")
        result = self.commands.docker.build_image(config.image_ref, self.workspace.root)
        if not result.success:
            raise DeploymentError(
                f"Building {config.image_name} failed", details=result.details
            )
        self.console.print(f"[green]✓ Built {escape(config.image_ref)}[/green]")

    def login(self, config: DriverConfig) -> None:
        """Log in to the configured registry.

        Login is skipped when no registry is configured. With a registry set,
        both credentials must be present before anything is run.

        Raises:
            ConfigurationError: If a registry is set but credentials are empty
            DeploymentError: If ``docker login`` fails
        """
        self.console.print("\n[bold]Docker login[/bold]")

        if not config.registry:
            self.console.print("[yellow]Docker registry not set. Skipping[/yellow]")
            return

        if not config.docker_usr or not config.docker_psw:
            raise ConfigurationError(
                "Docker credentials not set (DOCKER_USR and DOCKER_PSW)",
                details="Set them in the environment or pass "
                "--docker_usr and --docker_psw.",
            )

        result = self.commands.docker.login(
            config.registry, config.docker_usr, config.docker_psw
        )
        if not result.success:
            raise DeploymentError(
                f"Docker login to {config.registry} failed", details=result.details
            )
        self.console.print(f"[green]✓ Logged in to {escape(config.registry)}[/green]")

    def push(self, config: DriverConfig) -> None:
        """Log in and push the image to the registry.

        Raises:
            ConfigurationError: If registry credentials are missing
            DeploymentError: If login or ``docker push`` fails
        """
        self.login(config)

        self.console.print(
            f"\n[bold cyan]📦 Pushing {config.image_name}[/bold cyan]"
        )
        result = self.commands.docker.push_image(config.image_ref)
        if not result.success:
            raise DeploymentError(
                f"Pushing {config.image_name} failed", details=result.details
            )
        self.console.print(f"[green]✓ Pushed {escape(config.image_ref)}[/green]")
