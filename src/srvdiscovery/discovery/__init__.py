"""SRV seed-list and TXT option discovery.

Attributes:
    SrvResolver: Runs the SRV and TXT pipelines for one discovery hostname.
        See [SrvResolver][srvdiscovery.discovery.resolver.SrvResolver].
    ResolverConfig: Test hooks and resolver settings, passed by reference.
        See [ResolverConfig][srvdiscovery.discovery.configs.ResolverConfig].
    validate_srv_result: Domain-suffix check for SRV targets.
    validate_txt_result: Allow-list check for TXT options.
"""

from .configs import ResolverConfig, default_join_txt_records
from .resolver import SrvResolver
from .validation import (
    split_hosts,
    validate_srv_host,
    validate_srv_result,
    validate_txt_result,
)


__all__ = [
    "ResolverConfig",
    "SrvResolver",
    "default_join_txt_records",
    "split_hosts",
    "validate_srv_host",
    "validate_srv_result",
    "validate_txt_result",
]
