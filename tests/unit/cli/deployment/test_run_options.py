"""Tests for control-plane run options."""

import pytest
from pydantic import ValidationError

from ff_local.cli.deployment.control_plane.options import RunOptions


def test_defaults() -> None:
    options = RunOptions()

    assert options.namespace == "ff-control-plane"
    assert options.release_name == "firefoundry-control"
    assert options.version is None
    assert options.skip_crds is False
    assert options.dry_run is False
    assert options.debug is False


@pytest.mark.parametrize("namespace", ["FF", "ff_plane", "-ff", "ff-", ""])
def test_invalid_namespace_rejected(namespace: str) -> None:
    with pytest.raises(ValidationError):
        RunOptions(namespace=namespace)


def test_invalid_release_name_rejected() -> None:
    with pytest.raises(ValidationError):
        RunOptions(release_name="Firefoundry Control")


@pytest.mark.parametrize("version", ["", "   "])
def test_blank_version_floats(version: str) -> None:
    """A blank version is the same as no version pin."""
    assert RunOptions(version=version).version is None


def test_version_is_trimmed() -> None:
    assert RunOptions(version=" 0.2.0 ").version == "0.2.0"


def test_options_are_immutable() -> None:
    options = RunOptions()

    with pytest.raises(ValidationError):
        options.dry_run = True  # type: ignore[misc]
