"""Target namespace preparation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import ExternalToolError

if TYPE_CHECKING:
    from ff_local.utils.console_like import ConsoleLike

    from ..shell_commands import ShellCommands


class NamespaceEnsurer:
    """Creates the release namespace when it does not exist yet."""

    def __init__(self, commands: ShellCommands, console: ConsoleLike) -> None:
        self.commands = commands
        self.console = console

    def ensure(self, namespace: str, *, dry_run: bool = False) -> bool:
        """Make sure ``namespace`` exists.

        Args:
            namespace: Namespace name
            dry_run: Report what would happen without creating anything

        Returns:
            True if the namespace was (or would be) created, False if it existed

        Raises:
            ExternalToolError: If namespace creation fails
        """
        self.console.step("Preparing namespace...")

        if self.commands.kubectl.namespace_exists(namespace):
            self.console.info(f"Namespace exists: {namespace}")
            return False

        if dry_run:
            self.console.info(f"Would create namespace: {namespace}")
            return True

        self.console.info(f"Creating namespace: {namespace}")
        result = self.commands.kubectl.create_namespace(namespace)
        if not result.success:
            raise ExternalToolError(f"Creating namespace {namespace}", result)
        return True
