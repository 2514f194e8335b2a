"""YAML configuration loading.

Resolver configuration files are loaded with ``yaml.safe_load`` so that a
YAML tag can never instantiate arbitrary Python objects. The returned
dictionary is unvalidated; pass it to
[ResolverConfig.from_dict()][srvdiscovery.discovery.configs.ResolverConfig.from_dict].

Examples:
    ```python
    from srvdiscovery.core.yaml import load_yaml

    data = load_yaml("config/resolver.yaml")
    ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError


def load_yaml(config_path: str | Path) -> dict[str, Any]:
    """Load and parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file (absolute or relative).

    Returns:
        Parsed configuration. An empty file yields an empty dict.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file is not valid YAML or its top level
            is not a mapping.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with path.open(encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping, got {type(data).__name__}"
        )
    return data
