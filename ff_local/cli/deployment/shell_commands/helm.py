"""Helm command abstractions.

This module provides commands for Helm repository and release management,
including chart lookups and idempotent upgrade-or-install deployments.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from .types import ChartVersion, CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class HelmCommands:
    """Helm-related shell commands.

    Provides operations for:
    - Repository management (add, update)
    - Chart queries (search cached repository index)
    - Release management (upgrade --install)
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize Helm commands.

        Args:
            runner: Command runner for executing shell commands
        """
        self._runner = runner

    # =========================================================================
    # Repository Management
    # =========================================================================

    def repo_add(self, name: str, url: str) -> CommandResult:
        """Register a chart repository.

        Helm exits non-zero when the repository already exists with the
        same URL, so callers usually treat failure as informational.
        """
        return self._runner.run(["helm", "repo", "add", name, url])

    def repo_update(self, name: str) -> CommandResult:
        """Refresh the cached index of a single chart repository."""
        return self._runner.run(["helm", "repo", "update", name])

    # =========================================================================
    # Chart Queries
    # =========================================================================

    def search_repo(self, chart_ref: str) -> list[ChartVersion]:
        """Search the locally cached repository index for a chart.

        Args:
            chart_ref: Chart reference (e.g., "repo/chart")

        Returns:
            Matching chart entries, newest first. Empty if the lookup fails.
        """
        result = self._runner.run(
            ["helm", "search", "repo", chart_ref, "--output", "json"]
        )
        if not result.success or not result.stdout:
            return []

        try:
            entries = json.loads(result.stdout)
        except json.JSONDecodeError:
            logger.debug(f"Unparseable helm search output for {chart_ref}")
            return []

        return [
            ChartVersion(
                name=e.get("name", ""),
                version=e.get("version", ""),
                app_version=e.get("app_version", ""),
            )
            for e in entries
            if isinstance(e, dict)
        ]

    def latest_cached_version(self, chart_ref: str) -> str | None:
        """Get the newest version of a chart in the local repository cache.

        Returns:
            Version string, or None if the chart is not cached
        """
        for entry in self.search_repo(chart_ref):
            if entry.name == chart_ref and entry.version:
                return entry.version
        return None

    # =========================================================================
    # Release Management
    # =========================================================================

    def build_upgrade_install_command(
        self,
        release_name: str,
        chart_ref: str,
        namespace: str,
        *,
        value_files: list[Path] | None = None,
        version: str | None = None,
        dry_run: bool = False,
        debug: bool = False,
    ) -> list[str]:
        """Compose the `helm upgrade --install` argument list.

        Value files are passed in order; Helm merges later files over
        earlier ones.
        """
        cmd = [
            "helm",
            "upgrade",
            "--install",
            release_name,
            chart_ref,
            "--namespace",
            namespace,
        ]

        for vf in value_files or []:
            cmd.extend(["-f", str(vf)])

        if version:
            cmd.extend(["--version", version])
        if dry_run:
            cmd.append("--dry-run")
        if debug:
            cmd.append("--debug")
        return cmd

    def upgrade_install(
        self,
        cmd: list[str],
        *,
        on_output: Callable[[str], None] | None = None,
    ) -> CommandResult:
        """Run a `helm upgrade --install` command.

        Uses `helm upgrade --install` to idempotently deploy a chart.
        If the release doesn't exist, it will be installed. If it exists,
        it will be upgraded in place.

        Args:
            cmd: Argument list from build_upgrade_install_command
            on_output: Optional callback for real-time output streaming.
                      If provided, each line of output is passed to this function.

        Returns:
            CommandResult with deployment status

        Example:
            >>> cmd = helm.build_upgrade_install_command(
            ...     "firefoundry-control",
            ...     "firebrandanalytics/firefoundry-control-plane",
            ...     "ff-control-plane",
            ...     value_files=[Path("control-plane/values.yaml")],
            ... )
            >>> helm.upgrade_install(cmd, on_output=print)
        """
        if on_output:
            return self._runner.run_streaming(cmd, on_output=on_output)
        return self._runner.run(cmd, capture_output=True)
