"""Azure CLI command abstractions.

This module provides commands for Azure account inspection, subscription
switching and Blob Storage downloads via the `az` CLI.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .types import CommandResult

if TYPE_CHECKING:
    from .runner import CommandRunner


class AzureCommands:
    """Azure CLI shell commands.

    Provides operations for:
    - Session inspection (logged in, active subscription, user)
    - Subscription switching
    - Blob downloads using the signed-in identity
    """

    def __init__(self, runner: CommandRunner) -> None:
        """Initialize Azure CLI commands.

        Args:
            runner: Command runner for executing shell commands
        """
        self._runner = runner

    def _run(self, args: list[str]) -> CommandResult:
        return self._runner.run(["az", *args])

    # =========================================================================
    # Account
    # =========================================================================

    def is_logged_in(self) -> bool:
        """Check whether an Azure CLI session is active."""
        return self._run(["account", "show"]).success

    def _account_field(self, query: str) -> str | None:
        result = self._run(["account", "show", "--query", query, "-o", "tsv"])
        value = result.stdout.strip()
        return value if result.success and value else None

    def current_subscription(self) -> str | None:
        """Get the name of the active subscription."""
        return self._account_field("name")

    def current_user(self) -> str | None:
        """Get the signed-in user name."""
        return self._account_field("user.name")

    def set_subscription(self, subscription: str) -> CommandResult:
        """Switch the active subscription."""
        return self._run(["account", "set", "--subscription", subscription])

    # =========================================================================
    # Blob Storage
    # =========================================================================

    def download_blob(
        self,
        account_name: str,
        container_name: str,
        blob_name: str,
        destination: Path,
    ) -> CommandResult:
        """Download a single blob to a local file, overwriting it.

        Authenticates with the signed-in identity (`--auth-mode login`)
        rather than an account key.
        """
        return self._run(
            [
                "storage",
                "blob",
                "download",
                "--account-name",
                account_name,
                "--container-name",
                container_name,
                "--name",
                blob_name,
                "--file",
                str(destination),
                "--auth-mode",
                "login",
                "--overwrite",
                "--only-show-errors",
            ]
        )
