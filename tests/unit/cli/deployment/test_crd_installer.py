"""Tests for Flux CRD installation."""

from unittest.mock import MagicMock, call

import pytest

from ff_local.cli.deployment.constants import DeploymentConstants
from ff_local.cli.deployment.control_plane.crd_installer import CrdInstaller
from ff_local.cli.deployment.errors import ExternalToolError
from ff_local.cli.deployment.shell_commands.types import CommandResult


@pytest.fixture
def installer(
    mock_commands: MagicMock, mock_console: MagicMock, constants: DeploymentConstants
) -> CrdInstaller:
    return CrdInstaller(mock_commands, mock_console, constants)


def test_six_flux_crds_are_known(constants: DeploymentConstants) -> None:
    urls = constants.FLUX_CRD_URLS

    assert len(urls) == 6
    assert all(u.startswith("https://raw.githubusercontent.com/fluxcd/") for u in urls)
    assert urls[0].endswith("helm.toolkit.fluxcd.io_helmreleases.yaml")
    assert urls[-1].endswith("source.toolkit.fluxcd.io_ocirepositories.yaml")


def test_applies_every_crd_in_order(
    installer: CrdInstaller, mock_commands: MagicMock, constants: DeploymentConstants
) -> None:
    installer.install()

    assert mock_commands.kubectl.apply_manifest.call_args_list == [
        call(url, dry_run=False) for url in constants.FLUX_CRD_URLS
    ]


def test_first_failure_aborts(
    installer: CrdInstaller, mock_commands: MagicMock
) -> None:
    """A failed apply is fatal and later manifests are not attempted."""
    mock_commands.kubectl.apply_manifest.side_effect = [
        CommandResult(success=True),
        CommandResult(success=False, stderr="unable to fetch", returncode=1),
        CommandResult(success=True),
    ]

    with pytest.raises(ExternalToolError, match="helmrepositories"):
        installer.install()

    assert mock_commands.kubectl.apply_manifest.call_count == 2


def test_dry_run_validates_server_side(
    installer: CrdInstaller, mock_commands: MagicMock, mock_console: MagicMock
) -> None:
    installer.install(dry_run=True)

    for c in mock_commands.kubectl.apply_manifest.call_args_list:
        assert c.kwargs["dry_run"] is True
    mock_console.ok.assert_not_called()


def test_skip_only_warns(
    installer: CrdInstaller, mock_commands: MagicMock, mock_console: MagicMock
) -> None:
    installer.skip()

    mock_commands.kubectl.apply_manifest.assert_not_called()
    mock_console.warn.assert_called_once()
