"""Abstract blueprints and core utilities.

Every resource handler and API client implements one of the blueprints
defined here. Import them to type-hint your own code or to plug in a
different transport.
"""

from .client import PowerDNSClientBlueprint
from .resource import ResourceBlueprint
from .state import ResourceData, ZoneConfiguration
from .supported_resources import existing_resources, lifecycle_operations


__all__ = [
    "PowerDNSClientBlueprint",
    "ResourceBlueprint",
    "ResourceData",
    "ZoneConfiguration",
    "existing_resources",
    "lifecycle_operations",
]
