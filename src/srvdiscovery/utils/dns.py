"""Thin wrappers around the ``dnspython`` stub resolver.

Each function performs exactly one blocking query and converts the answer
into plain models. Failures are not translated here: ``dns.exception``
errors and ``OSError`` propagate to the discovery layer, which decides
which of them are fatal.

Note:
    A TXT record is made of one or more character-strings of at most 255
    bytes each. They are joined per record, so a long record comes back as
    a single string while separate records stay separate.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

import dns.resolver

from srvdiscovery.models.constants import DEFAULT_TIMEOUT, SRV_PROTOCOL, RecordType
from srvdiscovery.models.srv_record import SrvRecord


if TYPE_CHECKING:
    from dns.rdtypes.ANY.TXT import TXT
    from dns.rdtypes.IN.SRV import SRV


logger = logging.getLogger("srvdiscovery.utils.dns")


def build_resolver(timeout: float = DEFAULT_TIMEOUT) -> dns.resolver.Resolver:
    """Create a system-configured resolver bounded by *timeout* seconds.

    Raises:
        dns.resolver.NoResolverConfiguration: If the host has no usable
            resolver configuration.
    """
    resolver = dns.resolver.Resolver()
    resolver.timeout = timeout
    resolver.lifetime = timeout
    return resolver


def srv_query_name(host: str, service: str) -> str:
    """Return the SRV owner name, e.g. ``_mongodb._tcp.cluster0.example.com``."""
    return f"_{service}._{SRV_PROTOCOL}.{host}"


def lookup_srv(resolver: dns.resolver.Resolver, host: str, service: str) -> list[SrvRecord]:
    """Query SRV records for *service* over TCP under *host*.

    Records are returned in the order of the answer section.

    Raises:
        dns.exception.DNSException: NXDOMAIN, NoAnswer, timeouts and any
            other resolver failure.
        OSError: Socket-level failures.
    """
    name = srv_query_name(host, service)
    logger.debug("srv_query name=%s", name)
    answers = resolver.resolve(name, RecordType.SRV.value)
    records = []
    for rdata in answers:
        srv = cast("SRV", rdata)
        records.append(
            SrvRecord(
                target=str(srv.target),
                port=srv.port,
                priority=srv.priority,
                weight=srv.weight,
            )
        )
    logger.debug("srv_answer name=%s count=%s", name, len(records))
    return records


def decode_txt(rdata: TXT) -> str:
    """Join the character-strings of one TXT record into a single string."""
    return b"".join(rdata.strings).decode("utf-8", errors="replace")


def lookup_txt(resolver: dns.resolver.Resolver, host: str) -> list[str]:
    """Query TXT records for *host*, one decoded string per record.

    Raises:
        dns.exception.DNSException: NXDOMAIN, NoAnswer, timeouts and any
            other resolver failure.
        OSError: Socket-level failures.
    """
    logger.debug("txt_query name=%s", host)
    answers = resolver.resolve(host, RecordType.TXT.value)
    records = [decode_txt(cast("TXT", rdata)) for rdata in answers]
    logger.debug("txt_answer name=%s count=%s", host, len(records))
    return records
