"""Run options for the control-plane deployment."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_CONSTANTS

# RFC 1123 label, as enforced by the API server for namespace names
_DNS_LABEL = re.compile(r"^[a-z0-9]([-a-z0-9]*[a-z0-9])?$")


class RunOptions(BaseModel):
    """Options controlling a single control-plane deployment run.

    Options are mutually independent. An unset ``version`` means the chart
    floats to whatever version is newest in the local repository cache.
    """

    model_config = ConfigDict(frozen=True)

    version: str | None = Field(default=None, description="Chart version pin")
    namespace: str = Field(default=DEFAULT_CONSTANTS.DEFAULT_NAMESPACE, max_length=63)
    release_name: str = Field(
        default=DEFAULT_CONSTANTS.HELM_RELEASE_NAME, max_length=53
    )
    skip_crds: bool = False
    dry_run: bool = False
    debug: bool = False

    @field_validator("namespace", "release_name")
    @classmethod
    def _validate_dns_label(cls, value: str) -> str:
        if not _DNS_LABEL.match(value):
            raise ValueError(
                f"'{value}' must be lowercase alphanumerics or '-', "
                "starting and ending with an alphanumeric"
            )
        return value

    @field_validator("version")
    @classmethod
    def _blank_version_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None
