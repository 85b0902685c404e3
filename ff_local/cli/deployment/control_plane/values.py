"""Helm values layering.

Helm merges ``-f`` files left to right: mappings merge key by key, while
scalars and lists from later files replace earlier ones. The helpers here
reproduce that locally so a deployment can validate and summarize the
effective configuration before handing the files to Helm.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..errors import DeploymentError


@dataclass
class ComposedValues:
    """Effective values produced by layering an ordered list of files.

    Attributes:
        files: Value files in the order they were applied
        values: Deep-merged effective values
        overridden_keys: Dotted key paths whose value was replaced by a later file
    """

    files: list[Path]
    values: dict[str, Any] = field(default_factory=dict)
    overridden_keys: list[str] = field(default_factory=list)


def load_values_file(path: Path) -> dict[str, Any]:
    """Load a values file as a mapping.

    Raises:
        DeploymentError: If the file cannot be read, is not valid UTF-8 YAML
            or is not a mapping
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DeploymentError(f"Invalid YAML in {path}", details=str(e)) from e
    except UnicodeDecodeError as e:
        raise DeploymentError(
            f"Values file is not valid UTF-8: {path}", details=str(e)
        ) from e
    except OSError as e:
        raise DeploymentError(f"Cannot read values file: {path}", details=str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DeploymentError(
            f"Values file must contain a mapping: {path}",
            details=f"Top-level YAML type is {type(data).__name__}",
        )
    return data


def deep_merge(
    base: Mapping[str, Any],
    overlay: Mapping[str, Any],
    *,
    _prefix: str = "",
    _overridden: list[str] | None = None,
) -> dict[str, Any]:
    """Merge ``overlay`` over ``base`` without mutating either.

    Nested mappings merge recursively; any other value in the overlay
    replaces the base value for that key.
    """
    merged: dict[str, Any] = dict(base)
    for key, value in overlay.items():
        path = f"{_prefix}{key}"
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(
                current, value, _prefix=f"{path}.", _overridden=_overridden
            )
            continue
        if key in merged and _overridden is not None:
            _overridden.append(path)
        merged[key] = value
    return merged


def compose_values(files: Sequence[Path]) -> ComposedValues:
    """Layer value files in order, later files winning on collisions."""
    composed = ComposedValues(files=list(files))
    for path in files:
        composed.values = deep_merge(
            composed.values,
            load_values_file(path),
            _overridden=composed.overridden_keys,
        )
    return composed
