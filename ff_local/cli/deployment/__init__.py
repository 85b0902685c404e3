"""Deployment module for the local FireFoundry environment.

This package provides the two independent procedures:
- ControlPlaneDeployer: Flux CRDs, namespace and control-plane Helm release
- TemplateFetcher: Internal environment template download from Azure

The package is organized into subpackages for modularity:
- shell_commands: Abstractions for shell command execution
- control_plane: Components for the control-plane deployment
"""

from .control_plane import ControlPlaneDeployer, RunOptions
from .errors import DeploymentError, ExternalToolError, PreflightError
from .template_fetcher import TemplateFetcher

__all__ = [
    "ControlPlaneDeployer",
    "RunOptions",
    "TemplateFetcher",
    "DeploymentError",
    "ExternalToolError",
    "PreflightError",
]
