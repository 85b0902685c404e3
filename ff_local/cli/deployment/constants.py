"""Deployment constants and configuration.

This module centralizes all magic strings, paths, and configuration values
used by the control-plane deployment and the template setup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

_FLUX_CRD_BASE = "https://raw.githubusercontent.com/fluxcd/{controller}/refs/heads/main/config/crd/bases/{name}.yaml"


def _flux_crd(controller: str, name: str) -> str:
    return _FLUX_CRD_BASE.format(controller=controller, name=name)


@dataclass(frozen=True)
class DeploymentConstants:
    """Constants for the control-plane Helm deployment.

    This class provides a centralized location for all deployment-related
    constants, making them easy to find, update, and test.
    """

    # Kubernetes/Helm identifiers
    DEFAULT_NAMESPACE: str = "ff-control-plane"
    HELM_RELEASE_NAME: str = "firefoundry-control"
    HELM_REPO_NAME: str = "firebrandanalytics"
    HELM_REPO_URL: str = "https://firebrandanalytics.github.io/ff_infra"
    HELM_CHART_NAME: str = "firefoundry-control-plane"

    # Required executables
    REQUIRED_TOOLS: tuple[str, ...] = ("kubectl", "helm")

    # Flux CRDs required by the chart's HelmRelease/HelmRepository resources
    FLUX_CRD_URLS: tuple[str, ...] = field(
        default_factory=lambda: (
            _flux_crd("helm-controller", "helm.toolkit.fluxcd.io_helmreleases"),
            _flux_crd("source-controller", "source.toolkit.fluxcd.io_helmrepositories"),
            _flux_crd("source-controller", "source.toolkit.fluxcd.io_helmcharts"),
            _flux_crd("source-controller", "source.toolkit.fluxcd.io_buckets"),
            _flux_crd("source-controller", "source.toolkit.fluxcd.io_gitrepositories"),
            _flux_crd("source-controller", "source.toolkit.fluxcd.io_ocirepositories"),
        )
    )

    # Kong gateway exposure for local clusters
    GATEWAY_NODE_PORT: int = 30080

    # Relative path fragments for project structure
    CONTROL_PLANE_DIR: str = "control-plane"
    VALUES_FILE: str = "values.yaml"
    SECRETS_FILE: str = "secrets.yaml"
    SECRETS_TEMPLATE_FILE: str = "secrets.template.yaml"

    @property
    def chart_ref(self) -> str:
        """Get the repository-qualified chart reference."""
        return f"{self.HELM_REPO_NAME}/{self.HELM_CHART_NAME}"

    def gateway_service(self, release_name: str) -> str:
        """Get the Kong proxy service name rendered for a release."""
        return f"{release_name}-{self.HELM_CHART_NAME}-kong-proxy"


class DeploymentPaths:
    """Path resolver for control-plane configuration files.

    All paths are derived from the project root.
    """

    def __init__(
        self, project_root: Path, constants: DeploymentConstants | None = None
    ) -> None:
        """Initialize deployment paths.

        Args:
            project_root: Path to the project root directory
            constants: Optional deployment constants (uses defaults if not provided)
        """
        self._project_root = project_root
        self._constants = constants or DEFAULT_CONSTANTS

        self.control_plane = project_root / self._constants.CONTROL_PLANE_DIR

    @property
    def project_root(self) -> Path:
        """Get path to project root."""
        return self._project_root

    @property
    def values_yaml(self) -> Path:
        """Get path to the base Helm values file."""
        return self.control_plane / self._constants.VALUES_FILE

    @property
    def secrets_yaml(self) -> Path:
        """Get path to the optional secrets overlay."""
        return self.control_plane / self._constants.SECRETS_FILE

    @property
    def secrets_template_yaml(self) -> Path:
        """Get path to the secrets overlay template."""
        return self.control_plane / self._constants.SECRETS_TEMPLATE_FILE


@dataclass(frozen=True)
class TemplateConstants:
    """Constants for the internal environment template download."""

    AZURE_SUBSCRIPTION: str = "Firebrand R&D"
    STORAGE_ACCOUNT: str = "firebrand"
    CONTAINER_NAME: str = "internal"
    BLOB_NAME: str = "internal.json"
    TEMPLATE_SUBDIR: tuple[str, ...] = (".ff", "environments", "templates")
    TEMPLATE_FILE: str = "internal.json"
    AZURE_CLI_INSTALL_URL: str = (
        "https://docs.microsoft.com/en-us/cli/azure/install-azure-cli"
    )

    def template_dir(self, home: Path | None = None) -> Path:
        """Get the local directory templates are stored in."""
        return Path(home or Path.home()).joinpath(*self.TEMPLATE_SUBDIR)

    def template_path(self, home: Path | None = None) -> Path:
        """Get the local destination of the downloaded template."""
        return self.template_dir(home) / self.TEMPLATE_FILE


DEFAULT_CONSTANTS = DeploymentConstants()
