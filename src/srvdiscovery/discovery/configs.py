"""Resolver configuration model.

One [ResolverConfig][srvdiscovery.discovery.configs.ResolverConfig] is owned
by whoever performs discovery and is handed to
[SrvResolver][srvdiscovery.discovery.resolver.SrvResolver] by reference.
Nothing here is module-level state, so concurrent discovery sessions for
different clusters each carry their own instance.

See Also:
    [SrvResolver][srvdiscovery.discovery.resolver.SrvResolver]: The resolver
        that consumes this configuration.
    [load_yaml()][srvdiscovery.core.yaml.load_yaml]: YAML loader used by
        ``from_yaml()``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from srvdiscovery.core.exceptions import ConfigurationError
from srvdiscovery.core.yaml import load_yaml
from srvdiscovery.models.constants import (
    DEFAULT_RESCAN_INTERVAL,
    DEFAULT_SRV_SERVICE,
    DEFAULT_TIMEOUT,
)
from srvdiscovery.models.srv_record import SrvRecord


def default_join_txt_records() -> bool:
    """Return the ``join_txt_records`` value suited to the running platform.

    Some Windows resolver stacks hand back the fragments of a single TXT
    record as separate answers. Call this once at startup and store the
    result in the configuration; the parsing code itself never inspects the
    platform.
    """
    return sys.platform == "win32"


class ResolverConfig(BaseModel):
    """Settings and test hooks for one discovery session.

    With ``records_to_add``/``records_to_remove`` empty and
    ``min_rescan_interval`` unset, resolution behaves exactly like an
    untouched DNS lookup.

    Note:
        The resolver reads the lists for the duration of a call without
        locking. Callers sharing one instance across threads must
        serialize mutations themselves.
    """

    records_to_add: list[SrvRecord] = Field(
        default_factory=list,
        description="Synthetic SRV records appended to every lookup (testing only)",
    )
    records_to_remove: list[SrvRecord] = Field(
        default_factory=list,
        description="SRV records dropped from every lookup by (target, port) (testing only)",
    )
    min_rescan_interval: float | None = Field(
        default=None,
        gt=0.0,
        description="Seconds between SRV re-polls handed to the caller (testing only)",
    )
    srv_service_name: str = Field(
        default=DEFAULT_SRV_SERVICE,
        min_length=1,
        max_length=62,
        description="Service label of the SRV query, without the leading underscore",
    )
    join_txt_records: bool = Field(
        default=False,
        description="Concatenate every TXT answer into a single record before parsing",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0.0,
        le=120.0,
        description="Resolver lifetime in seconds for a single lookup",
    )

    @field_validator("srv_service_name")
    @classmethod
    def _validate_srv_service_name(cls, v: str) -> str:
        if v.startswith("_"):
            raise ValueError("srv_service_name must not include the leading underscore")
        if "." in v:
            raise ValueError("srv_service_name must be a single DNS label")
        return v

    @property
    def rescan_interval(self) -> float:
        """Effective minimum SRV re-poll interval in seconds.

        This package never polls; the value is only carried for the
        monitoring component that does.
        """
        if self.min_rescan_interval is None:
            return DEFAULT_RESCAN_INTERVAL
        return self.min_rescan_interval

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResolverConfig:
        """Validate a configuration dictionary.

        Raises:
            ConfigurationError: If any field fails validation.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid resolver configuration: {e}") from e

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> ResolverConfig:
        """Load and validate a YAML configuration file.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the YAML is malformed or fails validation.
        """
        return cls.from_dict(load_yaml(config_path))
