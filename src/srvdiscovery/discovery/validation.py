"""Security checks applied to everything that comes back from DNS.

DNS answers are a weaker trust channel than the connection string the user
typed, so two checks gate them:

* **Domain suffix** -- every SRV target must sit under the parent domain of
  the discovery host (the host minus its first label). Someone who controls
  ``evil.com`` cannot point a client discovering ``cluster0.example.com``
  at hosts outside ``example.com``.
* **TXT allow-list** -- a TXT record may only carry ``authSource`` and
  ``replicaSet``, neither of which can redirect or weaken a connection.

Also holds the structural checks on the discovery hostname itself, which
run before any query is sent.
"""

from __future__ import annotations

from rfc3986 import uri_reference
from rfc3986.exceptions import InvalidAuthority

from srvdiscovery.core.exceptions import InvalidInputError, SecurityValidationError
from srvdiscovery.models.txt_option import TxtOption


_SUFFIX_MISMATCH = "Domain suffix from SRV record not matched input domain"


def split_hosts(host: str) -> list[str]:
    """Split a raw host component on commas.

    Raises:
        InvalidInputError: If more than one hostname is present.
    """
    hosts = host.split(",")
    if len(hosts) != 1:
        raise InvalidInputError("URI with SRV must include one and only one hostname")
    return hosts


def validate_srv_host(host: str) -> None:
    """Check that *host* is a bare hostname usable for SRV discovery.

    Raises:
        InvalidInputError: If the host is empty, is not a plain authority
            (userinfo, path, malformed), or carries an explicit port.
    """
    if not host:
        raise InvalidInputError("URI with SRV must include a hostname")

    uri = uri_reference(f"//{host}")
    try:
        authority = uri.authority_info()
    except InvalidAuthority:
        raise InvalidInputError(f"Invalid SRV hostname: '{host}'") from None

    if uri.authority != host or authority["userinfo"] is not None:
        raise InvalidInputError(f"Invalid SRV hostname: '{host}'")
    if authority["port"] is not None or host.endswith(":"):
        raise InvalidInputError("URI with srv must not include a port number")


def validate_srv_result(record: str, host: str) -> None:
    """Check that an SRV target lies under the parent domain of *host*.

    The target must have at least two labels and at least as many labels as
    the discovery host, and its trailing labels must equal the host's labels
    minus the first one. Labels are compared exactly as received.

    Args:
        record: SRV target with the trailing root dot already removed.
        host: The discovery hostname.

    Raises:
        SecurityValidationError: If the target fails any of the checks.

    Examples:
        ```python
        validate_srv_result("node1.example.com", "cluster0.example.com")  # ok
        validate_srv_result("node.evil.com", "cluster0.example.com")      # raises
        ```
    """
    record_labels = record.split(".")
    host_labels = host.split(".")

    if len(record_labels) < 2:
        raise SecurityValidationError("DNS name must contain at least 2 labels", record, host)
    if len(record_labels) < len(host_labels):
        raise SecurityValidationError(_SUFFIX_MISMATCH, record, host)

    parent_labels = host_labels[1:]
    if record_labels[len(record_labels) - len(parent_labels) :] != parent_labels:
        raise SecurityValidationError(_SUFFIX_MISMATCH, record, host)


def validate_txt_result(tokens: list[str]) -> list[TxtOption]:
    """Check every ``key=value`` token of a TXT record against the allow-list.

    Returns:
        The parsed options, in token order.

    Raises:
        InvalidInputError: If a token is not ``key=value`` or its key is not
            allowed. The rejected key is reported as written.
    """
    options = []
    for token in tokens:
        try:
            option = TxtOption.parse(token)
        except ValueError as e:
            raise InvalidInputError("Invalid TXT record") from e
        if not option.is_allowed:
            raise InvalidInputError(f"Cannot specify option '{option.key}' in TXT record")
        options.append(option)
    return options
