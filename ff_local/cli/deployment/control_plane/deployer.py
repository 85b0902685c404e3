"""Control-plane deployer.

This module provides the ControlPlaneDeployer class which orchestrates the
control-plane deployment. It coordinates specialized components for:
- Preflight checks (tools, cluster access, values files) and values validation
- Flux CRD installation
- Helm repository refresh
- Namespace preparation
- Helm upgrade --install of the control-plane chart

Every step is idempotent, so the deployment can be re-run safely. Steps run
strictly in sequence and the first failure aborts the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.panel import Panel

from .crd_installer import CrdInstaller
from .namespace import NamespaceEnsurer
from .preflight import PreflightResult, PreflightValidator
from .release import ReleaseDeployer

if TYPE_CHECKING:
    from ff_local.utils.console_like import ConsoleLike

    from ..constants import DeploymentConstants, DeploymentPaths
    from ..shell_commands import ShellCommands
    from .options import RunOptions


@dataclass
class DeploymentSummary:
    """Outcome of a control-plane deployment run."""

    preflight: PreflightResult
    crds_applied: bool
    namespace_created: bool
    dry_run: bool


class ControlPlaneDeployer:
    """Deployer for the FireFoundry control plane.

    Attributes:
        preflight: Environment and configuration validator
        crds: Flux CRD installer
        namespaces: Namespace ensurer
        release: Helm release deployer
    """

    def __init__(
        self,
        console: ConsoleLike,
        commands: ShellCommands,
        constants: DeploymentConstants,
        paths: DeploymentPaths,
    ) -> None:
        """Initialize the control-plane deployer.

        Args:
            console: Console for narration
            commands: Shell command executor
            constants: Deployment constants
            paths: Deployment path resolver
        """
        self.console = console
        self.constants = constants

        self.preflight = PreflightValidator(commands, console, constants, paths)
        self.crds = CrdInstaller(commands, console, constants)
        self.namespaces = NamespaceEnsurer(commands, console)
        self.release = ReleaseDeployer(commands, console, constants)

    def deploy(self, options: RunOptions) -> DeploymentSummary:
        """Deploy or upgrade the control plane.

        Args:
            options: Run options

        Returns:
            Summary of what the run did

        Raises:
            DeploymentError: If any step fails
        """
        self.console.print(
            Panel.fit(
                "[bold blue]FireFoundry Control Plane Deployment[/bold blue]",
                border_style="blue",
            )
        )

        preflight = self.preflight.validate()
        values = self.release.compose_values(
            preflight.value_files, show_overrides=options.dry_run or options.debug
        )
        self.console.print()

        crds_applied = not options.skip_crds
        if crds_applied:
            self.crds.install(dry_run=options.dry_run)
        else:
            self.crds.skip()
        self.console.print()

        self.release.update_repository()
        self.console.print()

        created = self.namespaces.ensure(options.namespace, dry_run=options.dry_run)
        self.console.print()

        self.release.deploy(options, values)
        self.console.print()

        if options.dry_run:
            self.console.info("Dry run complete - review output above")
        else:
            self._print_next_steps(options, preflight.context)

        return DeploymentSummary(
            preflight=preflight,
            crds_applied=crds_applied,
            namespace_created=created,
            dry_run=options.dry_run,
        )

    def _print_next_steps(self, options: RunOptions, context: str) -> None:
        namespace = options.namespace
        if "minikube" in context.lower():
            gateway = (
                f"minikube service {self.constants.gateway_service(options.release_name)}"
                f" -n {namespace} --url"
            )
        else:
            gateway = f"http://localhost:{self.constants.GATEWAY_NODE_PORT}"

        lines = [
            "[bold green]Deployment Complete![/bold green]",
            "",
            "[bold]Check pod status:[/bold]",
            f"  kubectl get pods -n {namespace}",
            "[bold]Check helm release:[/bold]",
            f"  helm status {options.release_name} -n {namespace}",
            "[bold]Access Kong Gateway:[/bold]",
            f"  {gateway}",
            "",
            "[bold]Next steps:[/bold]",
            "  1. Monitor with k9s",
            "  2. Install ff-cli from: https://github.com/firebrandanalytics/ff-cli-releases",
            "  3. Download internal template: ff-local template setup",
            "  4. Create an environment: ff-cli environment create --template internal --name my-env",
        ]
        self.console.print(Panel("\n".join(lines), border_style="green"))
