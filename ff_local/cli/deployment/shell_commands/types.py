"""Data types for shell command results.

This module contains all dataclasses and type definitions used across
the shell command modules.
"""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = [
    "CommandResult",
    "ChartVersion",
]


@dataclass
class CommandResult:
    """Result of a command execution.

    Attributes:
        success: Whether the command exited with code 0
        stdout: Captured standard output
        stderr: Captured standard error (empty when merged into stdout)
        returncode: Process exit code
        command: Argument list that produced this result
    """

    success: bool
    stdout: str = ""
    stderr: str = ""
    returncode: int = 0
    command: list[str] = field(default_factory=list)

    @property
    def output(self) -> str:
        """Best available diagnostic text, preferring stderr."""
        return (self.stderr or self.stdout).strip()


@dataclass
class ChartVersion:
    """A chart entry as reported by `helm search repo`.

    Attributes:
        name: Chart reference (e.g., "firebrandanalytics/firefoundry-control-plane")
        version: Chart version
        app_version: Application version packaged by the chart
    """

    name: str
    version: str
    app_version: str = ""
