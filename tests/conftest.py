"""Shared fixtures for the ff-local test suite."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ff_local.cli.deployment.constants import DeploymentConstants, DeploymentPaths
from ff_local.cli.deployment.shell_commands.types import CommandResult


def _ok(stdout: str = "") -> CommandResult:
    return CommandResult(success=True, stdout=stdout, stderr="", returncode=0)


@pytest.fixture
def constants() -> DeploymentConstants:
    """Default deployment constants."""
    return DeploymentConstants()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project root with a base values file and no secrets overlay."""
    control_plane = tmp_path / "control-plane"
    control_plane.mkdir()
    (control_plane / "values.yaml").write_text("kong:\n  enabled: true\n")
    return tmp_path


@pytest.fixture
def paths(project_root: Path, constants: DeploymentConstants) -> DeploymentPaths:
    """Deployment paths rooted at the temporary project."""
    return DeploymentPaths(project_root, constants)


@pytest.fixture
def mock_console() -> MagicMock:
    """Console double recording narration calls."""
    return MagicMock()


@pytest.fixture
def mock_commands() -> MagicMock:
    """ShellCommands double describing a healthy, empty minikube cluster."""
    commands = MagicMock()
    commands.tool_available.return_value = True

    commands.kubectl.get_current_context.return_value = "minikube"
    commands.kubectl.cluster_info.return_value = _ok("Kubernetes control plane is running")
    commands.kubectl.namespace_exists.return_value = False
    commands.kubectl.create_namespace.return_value = _ok("namespace/ff-control-plane created")
    commands.kubectl.apply_manifest.return_value = _ok(
        "customresourcedefinition.apiextensions.k8s.io/x configured"
    )

    commands.helm.repo_add.return_value = _ok()
    commands.helm.repo_update.return_value = _ok()
    commands.helm.latest_cached_version.return_value = "0.2.0"
    commands.helm.build_upgrade_install_command.return_value = ["helm", "upgrade"]
    commands.helm.upgrade_install.return_value = _ok("Release has been upgraded")
    return commands
