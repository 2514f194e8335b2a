"""Shared constants for the models layer.

Kept here rather than in the discovery layer so that models, utils and
discovery can all import them without cycles.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final


class RecordType(StrEnum):
    """DNS record types queried during discovery.

    Attributes:
        SRV: Service locator record, yields the seed list.
        TXT: Free-form text record, yields extra connection options.
    """

    SRV = "SRV"
    TXT = "TXT"


DEFAULT_SRV_SERVICE: Final[str] = "mongodb"
"""Service label of the SRV query (``_mongodb._tcp.<host>``)."""

SRV_PROTOCOL: Final[str] = "tcp"

DEFAULT_RESCAN_INTERVAL: Final[float] = 60.0
"""SRV records should not be polled more than once every 60 seconds."""

DEFAULT_TIMEOUT: Final[float] = 10.0
"""Resolver lifetime in seconds for a single lookup."""

MAX_PORT: Final[int] = 65535

ALLOWED_TXT_OPTIONS: Final[frozenset[str]] = frozenset({"authsource", "replicaset"})
"""Lowercased option names a TXT record may carry.

DNS TXT records are a weaker trust channel than the connection string, so
only options that cannot redirect or weaken a connection are accepted.
"""

TXT_OPTION_SEPARATORS: Final[str] = ";&"
