"""Flux CRD installation.

The control-plane chart ships HelmRelease and source resources, so the Flux
CRDs must be registered before the release is installed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ExternalToolError

if TYPE_CHECKING:
    from ff_local.utils.console_like import ConsoleLike

    from ..constants import DeploymentConstants
    from ..shell_commands import ShellCommands


class CrdInstaller:
    """Applies the fixed set of Flux CRD manifests.

    `kubectl apply` is declarative, so re-applying an unchanged manifest is a
    no-op. Any failed apply aborts the run.
    """

    def __init__(
        self,
        commands: ShellCommands,
        console: ConsoleLike,
        constants: DeploymentConstants,
    ) -> None:
        self.commands = commands
        self.console = console
        self.constants = constants

    def install(self, *, dry_run: bool = False) -> None:
        """Apply every Flux CRD manifest in order.

        Args:
            dry_run: Use server-side dry-run so nothing is persisted

        Raises:
            ExternalToolError: If any manifest fails to apply
        """
        self.console.step("Installing Flux CRDs...")

        for url in self.constants.FLUX_CRD_URLS:
            result = self.commands.kubectl.apply_manifest(url, dry_run=dry_run)
            if not result.success:
                raise ExternalToolError(
                    f"Applying CRD {url.rsplit('/', 1)[-1]}", result
                )
            for line in result.stdout.strip().splitlines():
                self.console.print(f"  [dim]{line}[/dim]")

        if dry_run:
            self.console.info("Flux CRDs validated (server dry run)")
        else:
            self.console.ok("Flux CRDs installed")

    def skip(self) -> None:
        self.console.warn("Skipping Flux CRD installation (--skip-crds)")
