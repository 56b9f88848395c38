"""PowerDNS resource factory.

Maps resource type names to their lifecycle handlers.
``RESOURCE_REGISTRY`` is consumed by :func:`pdnsprovider.factory.resource_factory`.
"""

from pdnsprovider.base.resource import ResourceBlueprint
from pdnsprovider.powerdns.zone import ZoneResource


# Resource registry for PowerDNS
RESOURCE_REGISTRY: dict[str, type[ResourceBlueprint]] = {
    "powerdns_zone": ZoneResource,
}
