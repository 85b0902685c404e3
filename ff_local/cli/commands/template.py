"""Environment template commands."""

import typer

from ff_local.cli.context import get_cli_context
from ff_local.cli.deployment.template_fetcher import TemplateFetcher
from ff_local.cli.shared.console import with_error_handling

template_app = typer.Typer(
    name="template",
    help="Manage ff-cli environment templates.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@template_app.command()
@with_error_handling
def setup(ctx: typer.Context) -> None:
    """Download the internal environment template from Azure Blob Storage.

    Requires the Azure CLI, an `az login` session and access to the
    "Firebrand R&D" subscription.
    """
    cli = get_cli_context(ctx)
    cli.console.print_header("FireFoundry Internal Template Setup")
    TemplateFetcher(cli.commands, cli.console, cli.template_constants).fetch()
