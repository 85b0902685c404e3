"""Pre-deployment checks for the control-plane deployment.

This module confirms the environment can support a deployment before
anything in the cluster is mutated:
- Required tools (kubectl, helm) are installed
- A kubectl context is selected and its cluster is reachable
- The base values file exists

A missing secrets overlay is reported as a warning only, so a cluster can be
bootstrapped before secrets are provisioned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import PreflightError

if TYPE_CHECKING:
    from ff_local.utils.console_like import ConsoleLike

    from ..constants import DeploymentConstants, DeploymentPaths
    from ..shell_commands import ShellCommands


_INSTALL_HINTS = {
    "kubectl": "brew install kubectl  # macOS\nhttps://kubernetes.io/docs/tasks/tools/",
    "helm": "brew install helm  # macOS\nhttps://helm.sh/docs/intro/install/",
}


class ValidationSeverity(Enum):
    """Severity levels for preflight issues."""

    WARNING = "warning"  # Can proceed, but some features may not work
    ERROR = "error"  # Cannot proceed


@dataclass
class PreflightIssue:
    """Represents a detected environment issue."""

    severity: ValidationSeverity
    title: str
    description: str
    recovery_hint: str = ""


@dataclass
class PreflightResult:
    """Result of a successful preflight run."""

    context: str = ""
    value_files: list[Path] = field(default_factory=list)
    issues: list[PreflightIssue] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return any(i.severity == ValidationSeverity.WARNING for i in self.issues)

    @property
    def secrets_included(self) -> bool:
        """Check whether the secrets overlay is part of the value chain."""
        return len(self.value_files) > 1


class PreflightValidator:
    """Validates tools, cluster access and configuration files.

    Checks run in a fixed order and the first fatal failure raises
    PreflightError; nothing later in the sequence is attempted.
    """

    def __init__(
        self,
        commands: ShellCommands,
        console: ConsoleLike,
        constants: DeploymentConstants,
        paths: DeploymentPaths,
    ) -> None:
        """Initialize the validator.

        Args:
            commands: Shell command executor
            console: Console for narration
            constants: Deployment constants
            paths: Deployment path resolver
        """
        self.commands = commands
        self.console = console
        self.constants = constants
        self.paths = paths

    def validate(self) -> PreflightResult:
        """Run all preflight checks.

        Returns:
            PreflightResult with the selected context and ordered value files

        Raises:
            PreflightError: On the first fatal check failure
        """
        self.console.step("Checking prerequisites...")
        result = PreflightResult()

        self._check_tools()
        result.context = self._check_context()
        self._check_cluster_reachable()
        result.value_files.append(self._check_values_file())

        secrets = self._check_secrets_file(result)
        if secrets is not None:
            result.value_files.append(secrets)

        return result

    def _check_tools(self) -> None:
        for tool in self.constants.REQUIRED_TOOLS:
            if not self.commands.tool_available(tool):
                raise PreflightError(
                    f"{tool} is not installed. Please install it first.",
                    hint=_INSTALL_HINTS.get(tool),
                )
            self.console.info(f"{tool}: OK")

    def _check_context(self) -> str:
        context = self.commands.kubectl.get_current_context()
        if context is None:
            raise PreflightError(
                "No kubectl context configured. Please start your cluster first.",
                hint="minikube start\nk3d cluster create firefoundry",
            )
        self.console.info(f"kubectl context: {context}")
        return context

    def _check_cluster_reachable(self) -> None:
        probe = self.commands.kubectl.cluster_info()
        if not probe.success:
            raise PreflightError(
                "Cannot connect to Kubernetes cluster. Is your cluster running?",
                hint=probe.output or None,
            )
        self.console.info("Cluster connection: OK")

    def _check_values_file(self) -> Path:
        values = self.paths.values_yaml
        if not values.is_file():
            raise PreflightError(f"Values file not found: {values}")
        self.console.info(f"Values file: {values}")
        return values

    def _check_secrets_file(self, result: PreflightResult) -> Path | None:
        secrets = self.paths.secrets_yaml
        if secrets.is_file():
            self.console.info(f"Secrets file: {secrets}")
            return secrets

        template = self.paths.secrets_template_yaml.relative_to(self.paths.project_root)
        target = secrets.relative_to(self.paths.project_root)
        issue = PreflightIssue(
            severity=ValidationSeverity.WARNING,
            title=f"Secrets file not found: {secrets}",
            description="Continuing without secrets (some features may not work)",
            recovery_hint=f"To create secrets: cp {template} {target}",
        )
        result.issues.append(issue)
        self.console.warn(f"{issue.title}. {issue.description}")
        self.console.info(issue.recovery_hint)
        return None
