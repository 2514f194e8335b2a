"""Low-level DNS helpers.

Attributes:
    dns: Blocking SRV and TXT lookups through the ``dnspython`` stub
        resolver, returning plain models and raw strings.

Note:
    The utils layer has **zero** imports from ``srvdiscovery.core`` or
    ``srvdiscovery.discovery``; error translation and security checks
    happen in the discovery layer.
"""
