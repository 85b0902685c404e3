"""Kubectl command abstractions.

This module provides commands for Kubernetes cluster access and resource
management via kubectl subprocess calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class KubectlCommands:
    """Kubectl-related shell commands.

    Provides operations for:
    - Cluster context detection and connectivity probes
    - Namespace management
    - Manifest application
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize kubectl commands.

        Args:
            runner: Command runner for executing shell commands
        """
        self._runner = runner

    def _run(self, args: list[str]) -> CommandResult:
        return self._runner.run(["kubectl", *args])

    # =========================================================================
    # Cluster Context
    # =========================================================================

    def get_current_context(self) -> str | None:
        """Get the current kubectl context name.

        Returns:
            Context name, or None if no context is selected
        """
        result = self._run(["config", "current-context"])
        context = result.stdout.strip()
        return context if result.success and context else None

    def cluster_info(self) -> CommandResult:
        """Probe the API server of the current context."""
        return self._run(["cluster-info"])

    # =========================================================================
    # Namespace Management
    # =========================================================================

    def namespace_exists(self, namespace: str) -> bool:
        """Check if a namespace exists."""
        return self._run(["get", "namespace", namespace]).success

    def create_namespace(self, namespace: str) -> CommandResult:
        """Create a namespace."""
        return self._run(["create", "namespace", namespace])

    # =========================================================================
    # Resource Operations
    # =========================================================================

    def apply_manifest(self, source: str, *, dry_run: bool = False) -> CommandResult:
        """Apply a Kubernetes manifest from a file path or URL.

        Args:
            source: Local path or HTTPS URL of the manifest
            dry_run: Validate server-side without persisting anything

        Returns:
            CommandResult with apply status
        """
        args = ["apply", "-f", source]
        if dry_run:
            args.append("--dry-run=server")
        return self._run(args)
