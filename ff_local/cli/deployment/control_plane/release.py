"""Helm release management for the control plane.

This module handles the Helm repository refresh, values layering, chart
version resolution and the `helm upgrade --install` invocation.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger
from rich.markup import escape

from ..errors import ExternalToolError
from .values import ComposedValues, compose_values

if TYPE_CHECKING:
    from ff_local.utils.console_like import ConsoleLike

    from ..constants import DeploymentConstants
    from ..shell_commands import CommandResult, ShellCommands
    from .options import RunOptions


class ReleaseDeployer:
    """Composes and runs the control-plane Helm release.

    Handles:
    - Chart repository registration and index refresh
    - Ordered values layering (base, then secrets if present)
    - Version policy (explicit pin, otherwise float to latest cached)
    - Upgrade-or-install execution with streamed output
    """

    def __init__(
        self,
        commands: ShellCommands,
        console: ConsoleLike,
        constants: DeploymentConstants,
    ) -> None:
        """Initialize the release deployer.

        Args:
            commands: Shell command executor
            console: Console for narration
            constants: Deployment constants
        """
        self.commands = commands
        self.console = console
        self.constants = constants

    def update_repository(self) -> None:
        """Register the chart repository and refresh its index.

        Raises:
            ExternalToolError: If the index refresh fails
        """
        self.console.step("Updating Helm repository...")
        name = self.constants.HELM_REPO_NAME

        added = self.commands.helm.repo_add(name, self.constants.HELM_REPO_URL)
        if not added.success:
            # Usually "repository name already exists"
            logger.debug(f"helm repo add {name}: {added.output}")

        result = self.commands.helm.repo_update(name)
        if not result.success:
            raise ExternalToolError(f"Updating Helm repository {name}", result)
        self.console.ok("Helm repository updated")

    def compose_values(
        self, value_files: list[Path], *, show_overrides: bool = False
    ) -> ComposedValues:
        """Validate and layer the values files before anything is mutated.

        Args:
            value_files: Ordered values files, later files win
            show_overrides: Print which keys later files override

        Returns:
            The effective values

        Raises:
            DeploymentError: If a file is not a valid YAML mapping
        """
        composed = compose_values(value_files)
        if len(value_files) > 1:
            self.console.info("Including secrets file")
        if show_overrides and composed.overridden_keys:
            self.console.info(
                f"Keys overridden by later values files: {len(composed.overridden_keys)}"
            )
            for key in composed.overridden_keys:
                self.console.print(f"  [dim]• {escape(key)}[/dim]")
        return composed

    def resolve_version(self, requested: str | None) -> str | None:
        """Apply the chart version policy.

        An explicit version is pinned. Without one, the newest cached version
        is looked up for reporting only and the release floats to whatever
        Helm resolves.

        Returns:
            The version to pin, or None to float
        """
        if requested:
            self.console.info(f"Chart version: {requested}")
            return requested

        latest = self.commands.helm.latest_cached_version(self.constants.chart_ref)
        if latest:
            self.console.info(f"Chart version: {latest} (latest cached, not pinned)")
        else:
            self.console.info("Chart version: latest cached")
            self.console.warn(
                "Could not determine the cached chart version; Helm will use "
                "the newest version it can resolve. Pass --version to pin."
            )
        return None

    def deploy(self, options: RunOptions, values: ComposedValues) -> CommandResult:
        """Run `helm upgrade --install` for the control-plane release.

        Args:
            options: Run options (release name, namespace, version, flags)
            values: Values already validated by compose_values

        Returns:
            CommandResult of the Helm invocation

        Raises:
            ExternalToolError: If Helm exits non-zero
        """
        self.console.step("Deploying FireFoundry Control Plane...")

        version = self.resolve_version(options.version)

        if options.dry_run:
            self.console.warn("DRY RUN MODE - no changes will be made")

        cmd = self.commands.helm.build_upgrade_install_command(
            options.release_name,
            self.constants.chart_ref,
            options.namespace,
            value_files=values.files,
            version=version,
            dry_run=options.dry_run,
            debug=options.debug,
        )
        if options.debug:
            self.console.info(f"Command: {escape(' '.join(cmd))}")

        result = self.commands.helm.upgrade_install(
            cmd, on_output=lambda line: self.console.print(escape(line))
        )
        if not result.success:
            raise ExternalToolError("Helm upgrade --install", result)
        return result
