"""PowerDNS implementations."""

from .client import PowerDNSClient
from .zone import ZoneResource

__all__ = [
    "PowerDNSClient",
    "ZoneResource",
]
