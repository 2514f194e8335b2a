"""
Seed-list and option discovery for ``+srv`` connection strings.

[SrvResolver][srvdiscovery.discovery.resolver.SrvResolver] runs two
independent pipelines over a single discovery hostname:

* **SRV**: query ``_mongodb._tcp.<host>``, apply the test add/remove hooks,
  check every target against the host's parent domain, and return
  ``"host:port"`` seed addresses in resolver order.
* **TXT**: query ``<host>`` TXT, reject ambiguous zones publishing more than
  one record, split the record on ``;``/``&``, and return the raw
  ``key=value`` tokens once every key passes the allow-list.

Both pipelines block on the system resolver; the ``*_async`` variants run
them in a worker thread via ``asyncio.to_thread``.

See Also:
    [ResolverConfig][srvdiscovery.discovery.configs.ResolverConfig]: Test
        hooks, service name, timeout and TXT joining flag.
    [validate_srv_result()][srvdiscovery.discovery.validation.validate_srv_result]:
        The domain-suffix check.
    [validate_txt_result()][srvdiscovery.discovery.validation.validate_txt_result]:
        The TXT allow-list check.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

import dns.exception
import dns.resolver

from srvdiscovery.core.exceptions import (
    InvalidInputError,
    ResolutionError,
    SecurityValidationError,
)
from srvdiscovery.core.logger import Logger
from srvdiscovery.models.srv_record import SrvRecord
from srvdiscovery.models.txt_option import TxtOption
from srvdiscovery.utils.dns import build_resolver, lookup_srv, lookup_txt

from .configs import ResolverConfig
from .validation import (
    split_hosts,
    validate_srv_host,
    validate_srv_result,
    validate_txt_result,
)


_DNS_ERRORS = (OSError, dns.exception.DNSException)
_TXT_ABSENT = (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer)


class SrvResolver:
    """Resolve a discovery hostname into seed addresses and TXT options.

    The resolver holds no state of its own besides its configuration, so a
    single instance can serve concurrent calls as long as the test hooks on
    the configuration are not mutated mid-call.

    Attributes:
        _config: The [ResolverConfig][srvdiscovery.discovery.configs.ResolverConfig]
            passed in (by reference) or a default one.
        _resolver: Injected ``dns.resolver.Resolver``. When ``None`` a fresh
            resolver is built per lookup with the configured timeout.
        _logger: [Logger][srvdiscovery.core.logger.Logger] for discovery events.

    Examples:
        ```python
        resolver = SrvResolver()
        seeds = resolver.resolve_host_from_srv_records("cluster0.example.com")
        # ['node1.example.com:27017', 'node2.example.com:27017']
        options = resolver.resolve_additional_query_parameters_from_txt_records(
            "cluster0.example.com"
        )
        # ['authSource=admin', 'replicaSet=rs0']
        ```
    """

    def __init__(
        self,
        config: ResolverConfig | None = None,
        *,
        resolver: dns.resolver.Resolver | None = None,
    ) -> None:
        self._config = config if config is not None else ResolverConfig()
        self._resolver = resolver
        self._logger = Logger("srvdiscovery.discovery")

    @classmethod
    def from_dict(cls, data: dict[str, Any], **kwargs: Any) -> SrvResolver:
        """Build a resolver from a configuration dictionary."""
        return cls(ResolverConfig.from_dict(data), **kwargs)

    @classmethod
    def from_yaml(cls, config_path: str | Path, **kwargs: Any) -> SrvResolver:
        """Build a resolver from a YAML configuration file."""
        return cls(ResolverConfig.from_yaml(config_path), **kwargs)

    @property
    def config(self) -> ResolverConfig:
        """The configuration this resolver reads on every call."""
        return self._config

    @property
    def rescan_interval(self) -> float:
        """Minimum seconds between SRV re-polls, for the caller to honor."""
        return self._config.rescan_interval

    def _get_resolver(self) -> dns.resolver.Resolver:
        if self._resolver is not None:
            return self._resolver
        return build_resolver(self._config.timeout)

    # -------------------------------------------------------------------------
    # SRV
    # -------------------------------------------------------------------------

    def resolve_host_from_srv_records(self, host: str) -> list[str]:
        """Resolve the seed list for a single ``+srv`` hostname.

        Args:
            host: Host component of the connection string. Must name exactly
                one host, without a port.

        Returns:
            ``"host:port"`` seed addresses in resolver order.

        Raises:
            InvalidInputError: If *host* lists several hosts or has a port.
            ResolutionError: If the SRV lookup fails.
            SecurityValidationError: If any target is outside the parent
                domain of *host*.
        """
        (single_host,) = split_hosts(host)
        return self.fetch_seedlist_from_srv(single_host)

    def fetch_seedlist_from_srv(self, host: str) -> list[str]:
        """Look up, adjust, validate and format the SRV records of *host*.

        Arguments and errors are those of ``resolve_host_from_srv_records()``.
        """
        validate_srv_host(host)

        try:
            records = lookup_srv(self._get_resolver(), host, self._config.srv_service_name)
        except _DNS_ERRORS as e:
            self._logger.warning("srv_lookup_failed", host=host, error=str(e) or type(e).__name__)
            raise ResolutionError(host, e) from e

        records = self._apply_test_records(records)

        seeds = []
        for record in records:
            try:
                validate_srv_result(record.trimmed_target, host)
            except SecurityValidationError:
                self._logger.warning("srv_record_rejected", host=host, target=record.target)
                raise
            seeds.append(record.to_seed_address())

        self._logger.debug("seedlist_resolved", host=host, count=len(seeds))
        return seeds

    def _apply_test_records(self, records: list[SrvRecord]) -> list[SrvRecord]:
        """Append ``records_to_add`` then drop anything matching ``records_to_remove``."""
        to_add = self._config.records_to_add
        to_remove = self._config.records_to_remove
        if not to_add and not to_remove:
            return records

        merged = [*records, *to_add]
        kept = [r for r in merged if not any(r.matches(rm) for rm in to_remove)]
        self._logger.debug(
            "srv_test_records_applied",
            added=len(to_add),
            removed=len(merged) - len(kept),
        )
        return kept

    # -------------------------------------------------------------------------
    # TXT
    # -------------------------------------------------------------------------

    def resolve_additional_query_parameters_from_txt_records(self, host: str) -> list[str]:
        """Resolve extra connection options published in the TXT record of *host*.

        A missing TXT record (NXDOMAIN or no answer) is not an error and
        yields an empty list; any other resolver failure is.

        Returns:
            Raw ``key=value`` tokens as written in the record, not yet merged
            into any configuration.

        Raises:
            InvalidInputError: If more than one TXT record is published, a
                token is malformed, or a key is not allowed.
            ResolutionError: If the TXT lookup fails for a reason other than
                the record not existing.
        """
        try:
            records = lookup_txt(self._get_resolver(), host)
        except _TXT_ABSENT:
            self._logger.debug("txt_absent", host=host)
            return []
        except _DNS_ERRORS as e:
            self._logger.warning("txt_lookup_failed", host=host, error=str(e) or type(e).__name__)
            raise ResolutionError(host, e) from e

        if self._config.join_txt_records and records:
            records = ["".join(records)]

        if len(records) > 1:
            raise InvalidInputError("multiple records from TXT not supported")
        if not records:
            return []

        tokens = TxtOption.split_record(records[0])
        validate_txt_result(tokens)
        self._logger.debug("txt_options_resolved", host=host, count=len(tokens))
        return tokens

    # -------------------------------------------------------------------------
    # Async wrappers
    # -------------------------------------------------------------------------

    async def resolve_host_from_srv_records_async(self, host: str) -> list[str]:
        """Run the SRV pipeline in a worker thread."""
        return await asyncio.to_thread(self.resolve_host_from_srv_records, host)

    async def resolve_additional_query_parameters_from_txt_records_async(
        self, host: str
    ) -> list[str]:
        """Run the TXT pipeline in a worker thread."""
        return await asyncio.to_thread(
            self.resolve_additional_query_parameters_from_txt_records, host
        )
