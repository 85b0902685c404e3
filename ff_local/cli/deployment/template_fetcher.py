"""Internal environment template setup.

Downloads the internal environment template from Azure Blob Storage into the
local ff-cli template directory. This procedure is independent of the
control-plane deployment and shares no state with it.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from .constants import TemplateConstants
from .errors import DeploymentError, ExternalToolError, PreflightError

if TYPE_CHECKING:
    from ff_local.utils.console_like import ConsoleLike

    from .shell_commands import ShellCommands


class TemplateFetcher:
    """Fetches the internal template using the signed-in Azure CLI identity.

    The session must be scoped to one named subscription. If another
    subscription is active, a single switch is attempted; a rejected switch
    stops the procedure before anything is downloaded.
    """

    def __init__(
        self,
        commands: ShellCommands,
        console: ConsoleLike,
        constants: TemplateConstants | None = None,
        home: Path | None = None,
    ) -> None:
        """Initialize the template fetcher.

        Args:
            commands: Shell command executor
            console: Console for narration
            constants: Optional template constants (uses defaults if not provided)
            home: Home directory override for the destination path
        """
        self.commands = commands
        self.console = console
        self.constants = constants or TemplateConstants()
        self.home = home

    @property
    def destination(self) -> Path:
        """Get the local path the template is written to."""
        return self.constants.template_path(self.home)

    def fetch(self) -> Path:
        """Authenticate-check, then download the template.

        Returns:
            Path of the downloaded template

        Raises:
            PreflightError: If the Azure CLI is missing or not logged in
            ExternalToolError: If the subscription switch or download fails
            DeploymentError: If the template directory cannot be created
        """
        self._check_cli()
        self._ensure_subscription()

        user = self.commands.azure.current_user() or "unknown"
        subscription = self.commands.azure.current_subscription() or "unknown"
        self.console.info(f"Authenticated as: {user}")
        self.console.info(f"Subscription: {subscription}")
        self.console.print()

        self.console.step("Creating template directory...")
        try:
            self.destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DeploymentError(
                f"Cannot create template directory {self.destination.parent}",
                details=str(e),
            ) from e

        self.console.step("Downloading internal template...")
        result = self.commands.azure.download_blob(
            self.constants.STORAGE_ACCOUNT,
            self.constants.CONTAINER_NAME,
            self.constants.BLOB_NAME,
            self.destination,
        )
        if not result.success:
            raise ExternalToolError(
                f"Downloading {self.constants.CONTAINER_NAME}/{self.constants.BLOB_NAME}",
                result,
            )

        self.console.print()
        self.console.ok("Template installed successfully!")
        self.console.info(f"Location: {self.destination}")
        self.console.print()
        self.console.print("You can now create environments with:")
        self.console.print(
            "  ff-cli environment create --template internal --name <env-name>"
        )
        return self.destination

    def _check_cli(self) -> None:
        if not self.commands.tool_available("az"):
            raise PreflightError(
                "Azure CLI (az) is not installed.",
                hint=f"Install it from: {self.constants.AZURE_CLI_INSTALL_URL}",
            )
        if not self.commands.azure.is_logged_in():
            raise PreflightError("Not logged in to Azure.", hint="Run: az login")

    def _ensure_subscription(self) -> None:
        required = self.constants.AZURE_SUBSCRIPTION
        current = self.commands.azure.current_subscription()
        if current == required:
            return

        self.console.warn(f"Current subscription is '{current or 'none'}'")
        self.console.info(f"Switching to '{required}'...")
        result = self.commands.azure.set_subscription(required)
        if not result.success:
            raise ExternalToolError(
                f"Switching to subscription '{required}'",
                result,
                hint="Make sure you have access to this subscription.",
            )
