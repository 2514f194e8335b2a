"""
SRV record and seed address models.

An [SrvRecord][srvdiscovery.models.srv_record.SrvRecord] is what the
resolver answers for ``_mongodb._tcp.<host>`` (or what a test injects via
[ResolverConfig][srvdiscovery.discovery.configs.ResolverConfig]). It lives
only for the duration of one resolution call and is turned into a
``"host:port"`` seed address once it passes the domain-suffix check.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ._validation import validate_port, validate_str_not_empty, validate_uint
from .constants import MAX_PORT


@dataclass(frozen=True, slots=True)
class SrvRecord:
    """Immutable SRV answer: target host, port, and the unused priority/weight.

    Priority and weight are accepted from the resolver but never influence
    seed-list ordering, and they take no part in equality: two records are
    equal when their ``(target, port)`` pairs are.

    Attributes:
        target: Target domain name as received, possibly with a trailing dot.
        port: Service port (0-65535).
        priority: SRV priority field.
        weight: SRV weight field.

    Raises:
        TypeError: If a field has the wrong type.
        ValueError: If ``target`` is empty or a number is out of range.

    Examples:
        ```python
        record = SrvRecord("node1.example.com.", 27017)
        record.trimmed_target      # 'node1.example.com'
        record.to_seed_address()   # 'node1.example.com:27017'
        ```
    """

    target: str
    port: int
    priority: int = field(default=0, compare=False)
    weight: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        validate_str_not_empty(self.target, "target")
        validate_port(self.port)
        validate_uint(self.priority, "priority", MAX_PORT)
        validate_uint(self.weight, "weight", MAX_PORT)

    @property
    def trimmed_target(self) -> str:
        """The target with a single trailing root-label dot removed."""
        return self.target.removesuffix(".")

    def matches(self, other: SrvRecord) -> bool:
        """Return True if *other* has exactly the same target and port."""
        return self.target == other.target and self.port == other.port

    def to_seed_address(self) -> str:
        """Format the record as a ``"host:port"`` seed address."""
        return f"{self.trimmed_target}:{self.port}"
