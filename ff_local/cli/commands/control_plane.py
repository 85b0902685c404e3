"""Control-plane deployment commands.

This module provides the command that installs the Flux CRDs and deploys
or upgrades the FireFoundry control plane on the current cluster.
"""

from typing import Annotated

import typer
from pydantic import ValidationError

from ff_local.cli.context import get_cli_context
from ff_local.cli.deployment.constants import DEFAULT_CONSTANTS
from ff_local.cli.deployment.control_plane import ControlPlaneDeployer, RunOptions
from ff_local.cli.shared.console import with_error_handling
from ff_local.utils.log_setup import configure_logging

control_plane_app = typer.Typer(
    name="control-plane",
    help="Deploy or upgrade the FireFoundry control plane.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _build_options(**values: object) -> RunOptions:
    """Validate raw CLI values into RunOptions.

    Raises:
        typer.BadParameter: If a value fails validation
    """
    try:
        return RunOptions.model_validate(values)
    except ValidationError as e:
        messages = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in e.errors()
        ]
        raise typer.BadParameter("; ".join(messages)) from e


@control_plane_app.command()
@with_error_handling
def deploy(
    ctx: typer.Context,
    version: Annotated[
        str | None,
        typer.Option(
            "--version",
            "-v",
            envvar="FF_CHART_VERSION",
            help="Chart version (default: latest cached)",
        ),
    ] = None,
    namespace: Annotated[
        str,
        typer.Option(
            "--namespace",
            "-n",
            envvar="FF_NAMESPACE",
            help="Kubernetes namespace",
        ),
    ] = DEFAULT_CONSTANTS.DEFAULT_NAMESPACE,
    release: Annotated[
        str,
        typer.Option(
            "--release",
            "-r",
            envvar="FF_RELEASE",
            help="Helm release name",
        ),
    ] = DEFAULT_CONSTANTS.HELM_RELEASE_NAME,
    skip_crds: Annotated[
        bool,
        typer.Option("--skip-crds", help="Skip Flux CRD installation"),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Perform a dry run (helm --dry-run)"),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug output"),
    ] = False,
) -> None:
    """Deploy or upgrade the FireFoundry Control Plane.

    Examples:

        ff-local control-plane deploy              # latest cached chart

        ff-local control-plane deploy -v 0.2.0     # specific version

        ff-local control-plane deploy --dry-run    # preview only

    Prerequisites: kubectl configured for your cluster (minikube, k3d, etc.),
    Helm 3 installed, and control-plane/secrets.yaml created from
    secrets.template.yaml.
    """
    options = _build_options(
        version=version,
        namespace=namespace,
        release_name=release,
        skip_crds=skip_crds,
        dry_run=dry_run,
        debug=debug,
    )
    configure_logging(debug=options.debug)

    cli = get_cli_context(ctx)
    deployer = ControlPlaneDeployer(
        cli.console, cli.commands, cli.constants, cli.paths
    )
    deployer.deploy(options)
