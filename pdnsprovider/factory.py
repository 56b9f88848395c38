"""Resource and client factories.

Provides :func:`resource_factory`, which returns the lifecycle handler for
a resource type, and :func:`client_factory`, which builds a PowerDNS API
client from a raw configuration dict.
"""

from typing import overload, Literal

from pydantic import ValidationError

from pdnsprovider.base import PowerDNSClientBlueprint, ResourceBlueprint, existing_resources
from pdnsprovider.base.config import validate_config
from pdnsprovider.base.exceptions import ConfigurationError
from pdnsprovider.powerdns.client import PowerDNSClient
from pdnsprovider.powerdns.factory import RESOURCE_REGISTRY
from pdnsprovider.powerdns.zone import ZoneResource


@overload
def resource_factory(resource_type: Literal["powerdns_zone"]) -> ZoneResource: ...


@overload
def resource_factory(resource_type: str) -> ResourceBlueprint: ...


def resource_factory(resource_type: existing_resources | str) -> ResourceBlueprint:
    """
    Return the lifecycle handler for a resource type.
    Args:
        resource_type: The resource type name (e.g. 'powerdns_zone').
    Returns:
        An instance of the registered handler class.
    Raises:
        ValueError: If the resource type is not supported.
    """
    if resource_type not in RESOURCE_REGISTRY:
        raise ValueError(f"Unsupported resource type: {resource_type}")
    return RESOURCE_REGISTRY[resource_type]()


def client_factory(config: dict) -> PowerDNSClientBlueprint:
    """
    Create a PowerDNS API client.
    Args:
        config: Configuration dictionary (see :class:`PowerDNSConfig`).
    Returns:
        A configured :class:`PowerDNSClient`.
    Raises:
        ConfigurationError: If the config is not a mapping or fails validation.
    """
    if not isinstance(config, dict):
        raise ConfigurationError("Invalid provider config: expected a JSON object")
    try:
        configObj = validate_config(config)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid provider config: {e}") from e
    return PowerDNSClient(configObj)
