"""Shell command abstractions for image and chart deployment operations.

This package provides a small interface over the external tools the
deployment driver shells out to. It is organized into specialized modules
for each tool:

- docker: Docker image build, registry login and push
- helm: Helm chart packaging

Usage:
    from src.cli.deployment.shell_commands import ShellCommands

    commands = ShellCommands(project_root=Path("."))
    result = commands.docker.build_image("myapp:latest", Path("build"))
    if not result.success:
        print("Build failed")
"""

from pathlib import Path

from .docker import DockerCommands
from .helm import HelmCommands
from .runner import CommandRunner
from .types import CommandResult


class ShellCommands:
    """Unified interface for all shell command operations.

    Attributes:
        docker: Docker-related commands
        helm: Helm-related commands
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the shell commands executor.

        Args:
            project_root: Path to the project root directory.
                         Commands will be executed from this directory by default.
        """
        self._project_root = Path(project_root)
        self._runner = CommandRunner(self._project_root)

        self.docker = DockerCommands(self._runner)
        self.helm = HelmCommands(self._runner)

    @property
    def project_root(self) -> Path:
        """Get the project root path."""
        return self._project_root


__all__ = [
    "ShellCommands",
    "CommandResult",
    "DockerCommands",
    "HelmCommands",
    "CommandRunner",
]
