"""Deployment error types.

All failures that should stop a procedure derive from DeploymentError so the
CLI layer can render them uniformly and exit non-zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .shell_commands.types import CommandResult

# Helm streams its whole output; keep only the tail in error details
_MAX_DETAIL_LINES = 20


class DeploymentError(Exception):
    """Raised when a deployment operation fails."""

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(message)


class PreflightError(DeploymentError):
    """Raised when the environment cannot support a deployment.

    Covers missing tools, missing cluster context, an unreachable cluster
    and a missing required configuration file.
    """

    def __init__(self, message: str, hint: str | None = None):
        self.hint = hint
        super().__init__(message, details=hint)


class ExternalToolError(DeploymentError):
    """Raised when a delegated tool invocation exits non-zero."""

    def __init__(
        self,
        action: str,
        result: CommandResult,
        *,
        hint: str | None = None,
    ):
        self.cmd = list(result.command)
        self.result = result
        message = f"{action} failed (exit code {result.returncode})"
        parts: list[str] = []
        if self.cmd:
            parts.append(f"$ {' '.join(self.cmd)}")
        output_lines = result.output.splitlines()[-_MAX_DETAIL_LINES:]
        if output_lines:
            parts.append("\n".join(output_lines))
        if hint:
            parts.append(hint)
        super().__init__(message, details="\n\n".join(parts) or None)
