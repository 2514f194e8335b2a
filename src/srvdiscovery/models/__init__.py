"""Pure frozen dataclass models with zero I/O.

Attributes:
    SrvRecord: One SRV answer (target, port, priority, weight).
        See [SrvRecord][srvdiscovery.models.srv_record.SrvRecord].
    TxtOption: One ``key=value`` option from a TXT record.
        See [TxtOption][srvdiscovery.models.txt_option.TxtOption].
    RecordType: DNS record types queried during discovery.
"""

from .constants import (
    ALLOWED_TXT_OPTIONS,
    DEFAULT_RESCAN_INTERVAL,
    DEFAULT_SRV_SERVICE,
    DEFAULT_TIMEOUT,
    SRV_PROTOCOL,
    RecordType,
)
from .srv_record import SrvRecord
from .txt_option import TxtOption


__all__ = [
    "ALLOWED_TXT_OPTIONS",
    "DEFAULT_RESCAN_INTERVAL",
    "DEFAULT_SRV_SERVICE",
    "DEFAULT_TIMEOUT",
    "SRV_PROTOCOL",
    "RecordType",
    "SrvRecord",
    "TxtOption",
]
