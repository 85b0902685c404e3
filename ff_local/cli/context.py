"""CLI context and dependency container."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click
import typer

from ff_local.cli.deployment.constants import (
    DeploymentConstants,
    DeploymentPaths,
    TemplateConstants,
)
from ff_local.cli.deployment.shell_commands import ShellCommands
from ff_local.cli.shared.console import CLIConsole, console
from ff_local.utils.paths import get_project_root


@dataclass(frozen=True)
class CLIContext:
    """Runtime dependencies for CLI commands."""

    console: CLIConsole
    project_root: Path
    commands: ShellCommands
    constants: DeploymentConstants
    paths: DeploymentPaths
    template_constants: TemplateConstants


def build_cli_context() -> CLIContext:
    """Build a fresh CLIContext."""
    project_root = get_project_root()
    constants = DeploymentConstants()
    paths = DeploymentPaths(project_root, constants)

    return CLIContext(
        console=console,
        project_root=project_root,
        commands=ShellCommands(project_root),
        constants=constants,
        paths=paths,
        template_constants=TemplateConstants(),
    )


def get_cli_context(ctx: typer.Context | None = None) -> CLIContext:
    """Return the CLIContext from Typer, falling back to a new instance."""
    context = ctx or click.get_current_context(silent=True)
    if context and isinstance(context.obj, CLIContext):
        return context.obj
    return build_cli_context()
