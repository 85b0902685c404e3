"""Tests for the ff-local command line surface."""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from ff_local.cli import app
from ff_local.cli.deployment.control_plane import RunOptions
from ff_local.cli.deployment.errors import PreflightError

runner = CliRunner()

DEPLOYER = "ff_local.cli.commands.control_plane.ControlPlaneDeployer"
FETCHER = "ff_local.cli.commands.template.TemplateFetcher"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("FF_NAMESPACE", "FF_RELEASE", "FF_CHART_VERSION"):
        monkeypatch.delenv(var, raising=False)


def _deployed_options(mock_deployer: MagicMock) -> RunOptions:
    return mock_deployer.return_value.deploy.call_args[0][0]


@pytest.mark.parametrize(
    "args",
    [
        ["--bogus"],
        ["--skip-crds", "--bogus"],
        ["--dry-run", "-x"],
    ],
)
@patch(DEPLOYER)
def test_unknown_flags_fail_with_usage_without_deploying(
    mock_deployer: MagicMock, args: list[str]
) -> None:
    result = runner.invoke(app, ["control-plane", "deploy", *args])

    assert result.exit_code != 0
    assert "Usage" in result.output
    mock_deployer.assert_not_called()


@pytest.mark.parametrize("flag", ["-v", "--namespace", "-r"])
@patch(DEPLOYER)
def test_missing_option_value_is_a_usage_error(
    mock_deployer: MagicMock, flag: str
) -> None:
    result = runner.invoke(app, ["control-plane", "deploy", flag])

    assert result.exit_code == 2
    assert "requires an argument" in result.output
    mock_deployer.assert_not_called()


@pytest.mark.parametrize("flag", ["-h", "--help"])
@patch(DEPLOYER)
def test_help_exits_zero(mock_deployer: MagicMock, flag: str) -> None:
    result = runner.invoke(app, ["control-plane", "deploy", flag])

    assert result.exit_code == 0
    assert "--skip-crds" in result.output
    assert "--dry-run" in result.output
    mock_deployer.assert_not_called()


@patch(DEPLOYER)
def test_defaults(mock_deployer: MagicMock) -> None:
    result = runner.invoke(app, ["control-plane", "deploy"])

    assert result.exit_code == 0, result.output
    assert _deployed_options(mock_deployer) == RunOptions()


@patch(DEPLOYER)
def test_all_flags(mock_deployer: MagicMock) -> None:
    result = runner.invoke(
        app,
        [
            "control-plane",
            "deploy",
            "-v",
            "0.2.0",
            "-n",
            "ff-dev",
            "-r",
            "ff-ctl",
            "--skip-crds",
            "--dry-run",
            "--debug",
        ],
    )

    assert result.exit_code == 0, result.output
    assert _deployed_options(mock_deployer) == RunOptions(
        version="0.2.0",
        namespace="ff-dev",
        release_name="ff-ctl",
        skip_crds=True,
        dry_run=True,
        debug=True,
    )


@patch(DEPLOYER)
def test_environment_defaults(
    mock_deployer: MagicMock, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("FF_NAMESPACE", "ff-from-env")

    result = runner.invoke(app, ["control-plane", "deploy"])

    assert result.exit_code == 0, result.output
    assert _deployed_options(mock_deployer).namespace == "ff-from-env"


@patch(DEPLOYER)
def test_invalid_namespace_is_usage_error(mock_deployer: MagicMock) -> None:
    result = runner.invoke(app, ["control-plane", "deploy", "-n", "Not_Valid"])

    assert result.exit_code == 2
    mock_deployer.assert_not_called()


@patch(DEPLOYER)
def test_deployment_error_exits_one(mock_deployer: MagicMock) -> None:
    mock_deployer.return_value.deploy.side_effect = PreflightError(
        "No kubectl context configured. Please start your cluster first."
    )

    result = runner.invoke(app, ["control-plane", "deploy"])

    assert result.exit_code == 1
    assert "No kubectl context configured" in result.output


@patch(FETCHER)
def test_template_setup(mock_fetcher: MagicMock) -> None:
    result = runner.invoke(app, ["template", "setup"])

    assert result.exit_code == 0, result.output
    mock_fetcher.return_value.fetch.assert_called_once_with()


@patch(FETCHER)
def test_template_setup_rejects_flags(mock_fetcher: MagicMock) -> None:
    result = runner.invoke(app, ["template", "setup", "--force"])

    assert result.exit_code != 0
    mock_fetcher.assert_not_called()
