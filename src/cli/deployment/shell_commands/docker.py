"""Docker command abstractions.

This module provides commands for Docker image operations: building,
registry login and pushing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class DockerCommands:
    """Docker-related shell commands.

    Provides operations for:
    - Image management (build, push)
    - Registry authentication (login)
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize Docker commands.

        Args:
            runner: Command runner for executing shell commands
        """
        self._runner = runner

    # =========================================================================
    # Image Management
    # =========================================================================

    def build_image(self, image_ref: str, context_dir: Path) -> CommandResult:
        """Build a Docker image from a build context directory.

        Build output is streamed to the terminal rather than captured.

        Args:
            image_ref: Full image reference to tag the result with
                      (e.g., "registry.example.com/myapp:1.0.0")
            context_dir: Directory holding the Dockerfile and build inputs

        Returns:
            CommandResult with build status

        Example:
            >>> docker.build_image("reg.example.com/myapp:1.0.0", Path("build"))
        """
        return self._runner.run(
            ["docker", "build", "-t", image_ref, str(context_dir)],
            capture_output=False,
        )

    def push_image(self, image_ref: str) -> CommandResult:
        """Push a Docker image to a remote registry.

        Args:
            image_ref: Full image reference including registry
                      (e.g., "registry.example.com/app:v1")

        Returns:
            CommandResult with push status
        """
        return self._runner.run(["docker", "push", image_ref], capture_output=False)

    # =========================================================================
    # Registry Authentication
    # =========================================================================

    def login(self, registry: str, username: str, password: str) -> CommandResult:
        """Log in to a container registry.

        The password is passed on stdin so it never shows up in the process
        list or in command logs.

        Args:
            registry: Registry host (e.g., "registry.hub.docker.com")
            username: Registry username
            password: Registry password or token

        Returns:
            CommandResult with login status
        """
        return self._runner.run(
            ["docker", "login", registry, "-u", username, "--password-stdin"],
            input_text=password,
        )
