"""Data types for shell command results.

This module contains the dataclasses shared by the shell command modules.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CommandResult"]


@dataclass
class CommandResult:
    """Result of a command execution.

    Attributes:
        success: Whether the command exited with status 0
        stdout: Captured standard output (empty when not captured)
        stderr: Captured standard error (empty when not captured)
        returncode: Process exit status
    """

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0

    @property
    def details(self) -> str | None:
        """Best available diagnostic text for a failed command."""
        return self.stderr.strip() or self.stdout.strip() or None
