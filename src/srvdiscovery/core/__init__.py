"""Core layer: exceptions, structured logging, and YAML loading.

Sits between ``srvdiscovery.models`` and ``srvdiscovery.discovery``; it has
no DNS logic of its own.

Attributes:
    SrvDiscoveryError: Root of the exception hierarchy. See
        [exceptions][srvdiscovery.core.exceptions].
    Logger: Structured logger supporting key=value and JSON output modes.
        See [Logger][srvdiscovery.core.logger.Logger].
    load_yaml: Safe YAML loading with ``yaml.safe_load()``.
        See [load_yaml()][srvdiscovery.core.yaml.load_yaml].
"""

from .exceptions import (
    ConfigurationError,
    InvalidInputError,
    ResolutionError,
    SecurityValidationError,
    SrvDiscoveryError,
)
from .logger import Logger, StructuredFormatter, format_kv_pairs
from .yaml import load_yaml


__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "Logger",
    "ResolutionError",
    "SecurityValidationError",
    "SrvDiscoveryError",
    "StructuredFormatter",
    "format_kv_pairs",
    "load_yaml",
]
