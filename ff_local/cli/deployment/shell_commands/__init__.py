"""Shell command abstractions for control-plane and template operations.

This package provides a clean, well-documented interface for the external
tools the procedures delegate to. It is organized into specialized modules
for each tool:

- helm: Helm repository and release management
- kubectl: Kubernetes context probes, namespaces and manifests
- azure: Azure CLI account and Blob Storage operations

Design Principles:
- Single Responsibility: Each module focuses on one tool
- Consistent Return Types: Functions return CommandResult or typed values
- Separation of Concerns: Commands are decoupled from workflow logic

Usage:
    from ff_local.cli.deployment.shell_commands import ShellCommands

    commands = ShellCommands(project_root=Path("."))
    if not commands.kubectl.namespace_exists("ff-control-plane"):
        commands.kubectl.create_namespace("ff-control-plane")
"""

from pathlib import Path

from .azure import AzureCommands
from .helm import HelmCommands
from .kubectl import KubectlCommands
from .runner import CommandRunner
from .types import ChartVersion, CommandResult


class ShellCommands:
    """Unified interface for all shell command operations.

    This class provides a facade over the specialized command modules,
    offering a single point of access for deployment operations while
    maintaining separation of concerns internally.

    Attributes:
        helm: Helm-related commands
        kubectl: Kubernetes kubectl commands
        azure: Azure CLI commands
    """

    def __init__(self, project_root: Path) -> None:
        """Initialize the shell commands executor.

        Args:
            project_root: Path to the project root directory.
                         Commands will be executed from this directory by default.
        """
        self._project_root = Path(project_root)
        self._runner = CommandRunner(self._project_root)

        self.helm = HelmCommands(self._runner)
        self.kubectl = KubectlCommands(self._runner)
        self.azure = AzureCommands(self._runner)

    @property
    def project_root(self) -> Path:
        """Get the project root path."""
        return self._project_root

    def tool_available(self, executable: str) -> bool:
        """Check whether an executable is resolvable on PATH."""
        return self._runner.which(executable) is not None


__all__ = [
    "ShellCommands",
    "CommandResult",
    "ChartVersion",
    "HelmCommands",
    "KubectlCommands",
    "AzureCommands",
    "CommandRunner",
]
