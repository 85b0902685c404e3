"""Control-plane deployment components.

- options: Run options model
- preflight: Tool, cluster and configuration checks
- crd_installer: Flux CRD installation
- namespace: Target namespace preparation
- values: Helm values layering
- release: Helm repository refresh and upgrade --install
- deployer: Orchestration of the steps above
"""

from .deployer import ControlPlaneDeployer, DeploymentSummary
from .options import RunOptions

__all__ = ["ControlPlaneDeployer", "DeploymentSummary", "RunOptions"]
