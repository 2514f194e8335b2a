r"""srvdiscovery -- DNS seed-list discovery for ``+srv`` connection strings.

Resolves a single hostname into ``host:port`` seed addresses (SRV) and a
small set of allow-listed connection options (TXT), rejecting anything DNS
returns that would let a third party redirect or reconfigure the client.

Imports flow strictly downward:

```text
            discovery         SRV/TXT pipelines and security checks
             /     \
          core     utils      Exceptions, logging, YAML / dnspython lookups
             \     /
             models           Pure frozen dataclasses (zero I/O)
```

Note:
    Top-level imports (``from srvdiscovery import SrvResolver``) use lazy
    loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("srvdiscovery")

__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "Logger",
    "ResolutionError",
    "ResolverConfig",
    "SecurityValidationError",
    "SrvDiscoveryError",
    "SrvRecord",
    "SrvResolver",
    "TxtOption",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("srvdiscovery.core", "ConfigurationError"),
    "InvalidInputError": ("srvdiscovery.core", "InvalidInputError"),
    "Logger": ("srvdiscovery.core", "Logger"),
    "ResolutionError": ("srvdiscovery.core", "ResolutionError"),
    "SecurityValidationError": ("srvdiscovery.core", "SecurityValidationError"),
    "SrvDiscoveryError": ("srvdiscovery.core", "SrvDiscoveryError"),
    "SrvRecord": ("srvdiscovery.models", "SrvRecord"),
    "TxtOption": ("srvdiscovery.models", "TxtOption"),
    "ResolverConfig": ("srvdiscovery.discovery", "ResolverConfig"),
    "SrvResolver": ("srvdiscovery.discovery", "SrvResolver"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value
        return value
    raise AttributeError(f"module 'srvdiscovery' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
