"""srvdiscovery exception hierarchy.

Every failure of a discovery call surfaces as one of the typed exceptions
below so that callers can tell a malformed hostname apart from a DNS outage
or a record that failed the domain-suffix check. None of them is ever
retried inside the package.

Exception hierarchy:

```text
SrvDiscoveryError (base -- never raised directly)
├── ConfigurationError       -- config validation, bad YAML
├── InvalidInputError        -- bad hostname, bad TXT token, multiple TXT records
├── ResolutionError          -- the DNS lookup itself failed
└── SecurityValidationError  -- SRV target outside the discovery domain
```

See Also:
    [SrvResolver][srvdiscovery.discovery.resolver.SrvResolver]: Raises all
        of these from its public entry points.
    [validate_srv_result()][srvdiscovery.discovery.validation.validate_srv_result]:
        Raises
        [SecurityValidationError][srvdiscovery.core.exceptions.SecurityValidationError].
    [validate_txt_result()][srvdiscovery.discovery.validation.validate_txt_result]:
        Raises
        [InvalidInputError][srvdiscovery.core.exceptions.InvalidInputError].
"""

from __future__ import annotations


class SrvDiscoveryError(Exception):
    """Base exception for all srvdiscovery errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(SrvDiscoveryError):
    """Invalid or missing resolver configuration (YAML file or dict).

    See Also:
        [ResolverConfig.from_dict()][srvdiscovery.discovery.configs.ResolverConfig.from_dict]:
            Wraps pydantic validation failures in this exception.
    """


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class InvalidInputError(SrvDiscoveryError):
    """The hostname or a TXT-derived option is structurally wrong.

    Raised for a comma-separated host list, a host with an explicit port,
    a TXT token that is not ``key=value``, a TXT key outside the allow-list,
    and a zone publishing more than one TXT record. Always terminal.
    """


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


class ResolutionError(SrvDiscoveryError):
    """The underlying DNS lookup failed.

    The message is the resolver's own message; the original exception is
    kept on ``cause`` and chained as ``__cause__``.

    Attributes:
        hostname: Name that was queried.
        cause: Exception raised by the resolver.
    """

    def __init__(self, hostname: str, cause: BaseException) -> None:
        self.hostname = hostname
        self.cause = cause
        super().__init__(str(cause) or type(cause).__name__)


# ---------------------------------------------------------------------------
# Security
# ---------------------------------------------------------------------------


class SecurityValidationError(SrvDiscoveryError):
    """An SRV target is not inside the parent domain of the discovery host.

    Fails the entire resolution; a partially validated seed list is never
    returned.

    Attributes:
        record: The (trailing-dot trimmed) SRV target that was rejected.
        hostname: The discovery hostname it was checked against.
    """

    def __init__(self, message: str, record: str, hostname: str) -> None:
        self.record = record
        self.hostname = hostname
        super().__init__(f"{message}: record={record!r} host={hostname!r}")
