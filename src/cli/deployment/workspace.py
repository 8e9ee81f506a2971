"""Build workspace management.

The workspace is the transient ``build/`` directory holding the image build
inputs and the packaged chart. It is wiped at the start of every run and left
in place afterwards for inspection.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from .constants import DeploymentConstants
from .errors import ArtifactNotFoundError, DeploymentError

if TYPE_CHECKING:
    from rich.console import Console

    from .constants import DeploymentPaths


class Workspace:
    """Prepares and inspects the build workspace.

    Attributes:
        paths: Deployment path resolver
        console: Rich console for output
    """

    def __init__(
        self,
        paths: DeploymentPaths,
        console: Console,
        constants: DeploymentConstants | None = None,
    ) -> None:
        self.paths = paths
        self.console = console
        self.constants = constants or DeploymentConstants()

    @property
    def root(self) -> Path:
        return self.paths.build

    @property
    def chart_output(self) -> Path:
        return self.paths.chart_output

    def clean(self) -> None:
        """Remove the workspace left over from a previous run."""
        if self.root.exists():
            shutil.rmtree(self.root)

    def prepare_build_files(self) -> None:
        """Copy the application sources into a fresh workspace.

        Every entry of the application directory is copied under its own
        name; subdirectories are copied recursively. Hidden entries are
        skipped.

        Raises:
            DeploymentError: If the sources are missing or cannot be copied
        """
        self.console.print("\n[bold]Preparing files[/bold]")
        source = self.paths.app_source
        try:
            self.root.mkdir(parents=True, exist_ok=True)
            for entry in sorted(source.iterdir()):
                if entry.name.startswith("."):
                    continue
                target = self.root / entry.name
                if entry.is_dir():
                    shutil.copytree(entry, target)
                else:
                    shutil.copy2(entry, target)
                self.console.print(
                    f"[dim]'{escape(str(entry))}' -> '{escape(str(target))}'[/dim]"
                )
        except OSError as e:
            raise DeploymentError(
                "Preparing build files failed",
                details=f"Could not copy {source} to {self.root}: {e}",
            ) from e

    def reset_chart_output(self) -> None:
        """Delete and recreate the packaged chart output directory.

        Raises:
            DeploymentError: If the directory cannot be removed or created
        """
        try:
            if self.chart_output.exists():
                shutil.rmtree(self.chart_output)
            self.chart_output.mkdir(parents=True)
        except OSError as e:
            raise DeploymentError(
                "Preparing chart output failed",
                details=f"Could not reset {self.chart_output}: {e}",
            ) from e

    def find_chart_artifact(self) -> Path:
        """Locate the packaged chart archive.

        Returns:
            Path to the single chart archive in the output directory

        Raises:
            ArtifactNotFoundError: If no archive exists
            DeploymentError: If more than one archive matches
        """
        pattern = self.constants.CHART_ARTIFACT_PATTERN
        matches = sorted(self.chart_output.glob(pattern)) if self.chart_output.is_dir() else []

        if not matches:
            raise ArtifactNotFoundError(
                "Did not find the helm chart to deploy",
                details=f"No {pattern} file in {self.chart_output}. "
                "Run with --pack_helm to package the chart first.",
            )
        if len(matches) > 1:
            names = "\n".join(f"  - {m.name}" for m in matches)
            raise DeploymentError(
                "Found more than one helm chart to deploy",
                details=f"Expected exactly one {pattern} in {self.chart_output}:\n{names}",
            )
        return matches[0]
