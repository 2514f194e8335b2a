"""
Connection options carried by a DNS TXT record.

A TXT record such as ``authSource=admin&replicaSet=rs0`` is split into
``key=value`` tokens; each token parses into a
[TxtOption][srvdiscovery.models.txt_option.TxtOption]. The discovery layer
returns the raw tokens to its caller and uses this model only to check them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

from ._validation import validate_str_no_null
from .constants import ALLOWED_TXT_OPTIONS, TXT_OPTION_SEPARATORS


@dataclass(frozen=True, slots=True)
class TxtOption:
    """Immutable ``key=value`` pair taken from a TXT record.

    Attributes:
        key: Option name exactly as written in the record.
        value: Option value exactly as written (may be empty, may contain ``=``).

    Examples:
        ```python
        option = TxtOption.parse("replicaSet=rs0")
        option.normalized_key   # 'replicaset'
        option.is_allowed       # True
        ```
    """

    key: str
    value: str

    _SPLIT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(f"[{re.escape(TXT_OPTION_SEPARATORS)}]")

    def __post_init__(self) -> None:
        validate_str_no_null(self.key, "key")
        validate_str_no_null(self.value, "value")

    @property
    def normalized_key(self) -> str:
        """The option name case-folded to lowercase."""
        return self.key.lower()

    @property
    def is_allowed(self) -> bool:
        """Whether the option may originate from DNS."""
        return self.normalized_key in ALLOWED_TXT_OPTIONS

    def to_token(self) -> str:
        return f"{self.key}={self.value}"

    @classmethod
    def parse(cls, token: str) -> TxtOption:
        """Parse a single ``key=value`` token, splitting on the first ``=``.

        Raises:
            ValueError: If the token has no ``=``.
        """
        key, sep, value = token.partition("=")
        if not sep:
            raise ValueError(f"TXT option must be key=value, got {token!r}")
        return cls(key=key, value=value)

    @classmethod
    def split_record(cls, record: str) -> list[str]:
        """Split a TXT record into tokens on ``;`` or ``&``, dropping empty fields."""
        return [token for token in cls._SPLIT_PATTERN.split(record) if token]
