import os
from pathlib import Path

PROJECT_ROOT_ENV = "FF_LOCAL_ROOT"


def get_project_root() -> Path:
    """Get the project root directory.

    Honours the FF_LOCAL_ROOT environment variable, otherwise walks up from
    the module location to find the project root, identified by the
    presence of pyproject.toml.

    Returns:
        Path to the project root directory
    """
    override = os.getenv(PROJECT_ROOT_ENV)
    if override:
        return Path(override).expanduser().resolve()

    current = Path(__file__).resolve()

    # Walk up the directory tree looking for pyproject.toml
    for parent in [current, *current.parents]:
        if (parent / "pyproject.toml").exists():
            return parent

    # Fallback to the current working directory for installed copies
    return Path.cwd()
