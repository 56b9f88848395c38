"""pdnsprovider — PowerDNS resource handlers for infrastructure-as-code hosts.

Entry point for the library. Import :func:`resource_factory` and
:func:`client_factory` to drive a lifecycle operation::

    from pdnsprovider import client_factory, resource_factory

    client = client_factory({"server_url": "http://pdns:8081", "api_key": "secret"})
    zone = resource_factory("powerdns_zone")
"""

from .base import (
    PowerDNSClientBlueprint,
    ResourceBlueprint,
    ResourceData,
    ZoneConfiguration,
)
from .factory import client_factory, resource_factory

__all__ = [
    "PowerDNSClientBlueprint",
    "ResourceBlueprint",
    "ResourceData",
    "ZoneConfiguration",
    "client_factory",
    "resource_factory",
]
