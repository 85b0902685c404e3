"""Main CLI application module.

This module provides the main entry point for the ff-local CLI.

Command Groups:
- control-plane: Deploy or upgrade the FireFoundry control plane
- template: Download the internal environment template
"""

import typer
from dotenv import load_dotenv

from ff_local.utils.log_setup import configure_logging
from ff_local.utils.paths import get_project_root

from .commands import control_plane_app, template_app
from .context import build_cli_context

# Create the main CLI application
app = typer.Typer(
    help="FireFoundry local environment tooling",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.add_typer(control_plane_app, name="control-plane")
app.add_typer(template_app, name="template")


@app.callback()
def _init(ctx: typer.Context) -> None:
    # .env supplies FF_* option defaults; real environment variables win
    load_dotenv(get_project_root() / ".env", override=False)
    configure_logging()
    ctx.obj = build_cli_context()


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
