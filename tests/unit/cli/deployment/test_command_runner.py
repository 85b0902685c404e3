"""Tests for the command runner and external tool errors."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

from ff_local.cli.deployment.errors import DeploymentError, ExternalToolError
from ff_local.cli.deployment.shell_commands.runner import CommandRunner
from ff_local.cli.deployment.shell_commands.types import CommandResult


@patch("ff_local.cli.deployment.shell_commands.runner.subprocess.run")
def test_run_returns_typed_result(mock_run: MagicMock) -> None:
    """Exit code, captured output and argv are carried on the result."""
    mock_run.return_value = subprocess.CompletedProcess(
        args=["helm", "version"], returncode=0, stdout="v3.14.0\n", stderr=""
    )
    runner = CommandRunner(Path("/repo"))

    result = runner.run(["helm", "version"])

    assert result.success is True
    assert result.stdout == "v3.14.0\n"
    assert result.returncode == 0
    assert result.command == ["helm", "version"]
    assert mock_run.call_args.kwargs["cwd"] == Path("/repo")
    assert mock_run.call_args.kwargs["check"] is False


@patch("ff_local.cli.deployment.shell_commands.runner.subprocess.run")
def test_failed_run_renders_as_external_tool_error(mock_run: MagicMock) -> None:
    """A non-zero result carries its argv and output into ExternalToolError."""
    mock_run.return_value = subprocess.CompletedProcess(
        args=["kubectl", "cluster-info"],
        returncode=1,
        stdout="",
        stderr="The connection to the server localhost:8080 was refused",
    )
    runner = CommandRunner(Path("/repo"))

    result = runner.run(["kubectl", "cluster-info"])
    error = ExternalToolError("Cluster probe", result)

    assert result.success is False
    assert isinstance(error, DeploymentError)
    assert error.message == "Cluster probe failed (exit code 1)"
    assert "$ kubectl cluster-info" in (error.details or "")
    assert "connection to the server" in (error.details or "")


@patch("ff_local.cli.deployment.shell_commands.runner.shutil.which")
def test_which_delegates_to_path_lookup(mock_which: MagicMock) -> None:
    mock_which.return_value = None

    assert CommandRunner(Path(".")).which("helm") is None
    mock_which.assert_called_once_with("helm")


def test_external_tool_error_keeps_output_tail() -> None:
    """Long streamed output is trimmed to its last lines."""
    output = "\n".join(f"line {i}" for i in range(100))
    result = CommandResult(
        success=False, stdout=output, returncode=1, command=["helm", "upgrade"]
    )

    error = ExternalToolError("Helm upgrade --install", result, hint="Check values")

    details = error.details or ""
    assert "line 99" in details
    assert "line 0\n" not in details
    assert details.endswith("Check values")
    assert error.cmd == ["helm", "upgrade"]


def test_external_tool_error_without_command_or_output() -> None:
    error = ExternalToolError("Download", CommandResult(success=False, returncode=2))

    assert error.message == "Download failed (exit code 2)"
    assert error.details is None
