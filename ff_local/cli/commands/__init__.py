"""CLI command modules.

Command Groups:
- control-plane: Flux CRDs and control-plane Helm release
- template: ff-cli environment template setup
"""

from .control_plane import control_plane_app
from .template import template_app

__all__ = [
    "control_plane_app",
    "template_app",
]
