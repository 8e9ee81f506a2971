"""Unit tests for build workspace management."""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.cli.deployment.constants import DeploymentPaths
from src.cli.deployment.errors import ArtifactNotFoundError, DeploymentError
from src.cli.deployment.workspace import Workspace


@pytest.fixture
def workspace(paths: DeploymentPaths, mock_console: MagicMock) -> Workspace:
    return Workspace(paths, mock_console)


class TestClean:
    def test_removes_existing_workspace(self, workspace: Workspace) -> None:
        (workspace.root / "helm-chart").mkdir(parents=True)
        (workspace.root / "stale.txt").write_text("old")

        workspace.clean()

        assert not workspace.root.exists()

    def test_missing_workspace_is_fine(self, workspace: Workspace) -> None:
        workspace.clean()

        assert not workspace.root.exists()


class TestPrepareBuildFiles:
    def test_copies_sources_preserving_names(self, workspace: Workspace) -> None:
        workspace.prepare_build_files()

        assert (workspace.root / "Dockerfile").read_text() == "FROM nginx:alpine\n"
        assert (workspace.root / "index.html").exists()
        assert (workspace.root / "static" / "app.css").exists()

    def test_skips_hidden_entries(
        self, workspace: Workspace, project_root: Path
    ) -> None:
        (project_root / "SimpleApp" / ".env").write_text("SECRET=1")

        workspace.prepare_build_files()

        assert not (workspace.root / ".env").exists()
        assert (workspace.root / "Dockerfile").exists()

    def test_missing_source_directory_is_fatal(
        self, workspace: Workspace, project_root: Path
    ) -> None:
        shutil.rmtree(project_root / "SimpleApp")

        with pytest.raises(DeploymentError) as exc_info:
            workspace.prepare_build_files()

        assert exc_info.value.message == "Preparing build files failed"
        assert "SimpleApp" in (exc_info.value.details or "")


class TestChartOutput:
    def test_reset_chart_output_empties_directory(self, workspace: Workspace) -> None:
        workspace.chart_output.mkdir(parents=True)
        (workspace.chart_output / "old-0.0.1.tgz").write_bytes(b"old")

        workspace.reset_chart_output()

        assert workspace.chart_output.is_dir()
        assert list(workspace.chart_output.iterdir()) == []

    def test_reset_chart_output_failure_is_reported(self, workspace: Workspace) -> None:
        workspace.root.mkdir(parents=True)
        workspace.chart_output.write_text("not a directory")

        with pytest.raises(DeploymentError) as exc_info:
            workspace.reset_chart_output()

        assert exc_info.value.message == "Preparing chart output failed"
        assert str(workspace.chart_output) in (exc_info.value.details or "")

    def test_find_chart_artifact(self, workspace: Workspace) -> None:
        workspace.reset_chart_output()
        artifact = workspace.chart_output / "simpleapp-0.1.0.tgz"
        artifact.write_bytes(b"chart")

        assert workspace.find_chart_artifact() == artifact

    def test_find_ignores_other_files(self, workspace: Workspace) -> None:
        workspace.reset_chart_output()
        (workspace.chart_output / "README.md").write_text("notes")
        artifact = workspace.chart_output / "simpleapp-0.1.0.tgz"
        artifact.write_bytes(b"chart")

        assert workspace.find_chart_artifact() == artifact

    def test_missing_output_directory(self, workspace: Workspace) -> None:
        with pytest.raises(ArtifactNotFoundError) as exc_info:
            workspace.find_chart_artifact()

        assert exc_info.value.message == "Did not find the helm chart to deploy"

    def test_empty_output_directory(self, workspace: Workspace) -> None:
        workspace.reset_chart_output()

        with pytest.raises(ArtifactNotFoundError):
            workspace.find_chart_artifact()

    def test_multiple_artifacts_are_rejected(self, workspace: Workspace) -> None:
        workspace.reset_chart_output()
        (workspace.chart_output / "simpleapp-0.1.0.tgz").write_bytes(b"a")
        (workspace.chart_output / "simpleapp-0.2.0.tgz").write_bytes(b"b")

        with pytest.raises(DeploymentError) as exc_info:
            workspace.find_chart_artifact()

        assert not isinstance(exc_info.value, ArtifactNotFoundError)
        assert "simpleapp-0.2.0.tgz" in (exc_info.value.details or "")
