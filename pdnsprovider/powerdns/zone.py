"""PowerDNS zone resource.

Maps the declared ``powerdns_zone`` configuration (name, kind,
nameservers) onto the PowerDNS zone API. ``name`` and ``nameservers`` are
force-new; only ``kind`` is updated in place.

Two behaviours are kept as-is on purpose:

* ``read`` refreshes ``name`` and ``kind`` but never ``nameservers``.
* ``create`` stores the server-assigned zone id as the identity while
  ``import_state`` stores the zone name.
"""

from __future__ import annotations

import json

from pdnsprovider.base.client import PowerDNSClientBlueprint
from pdnsprovider.base.exceptions import (
    ImportParseError,
    MissingFieldError,
    ProviderError,
    ZoneError,
)
from pdnsprovider.base.logger import pdns_logger
from pdnsprovider.base.models import ZoneInfo
from pdnsprovider.base.resource import ResourceBlueprint
from pdnsprovider.base.state import ResourceData

RESOURCE_TYPE = "powerdns_zone"


def _zone_error(message: str, operation: str, resource_id: str) -> ZoneError:
    """Log a failed lifecycle call with its cause and build the error to raise."""
    pdns_logger.error(
        message,
        resource=RESOURCE_TYPE, operation=operation, resource_id=resource_id, exc_info=True,
    )
    return ZoneError(message)


def parse_import_id(raw: str) -> dict[str, str]:
    """Decode an import identifier such as ``{"name": "example.com."}``.

    Raises:
        ImportParseError: If *raw* is not a JSON object of string values.
    """
    try:
        data = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ImportParseError(f"invalid import identifier {raw!r}: {e}") from e
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        raise ImportParseError(
            f"invalid import identifier {raw!r}: expected a JSON object of strings"
        )
    return data


class ZoneResource(ResourceBlueprint):
    """Lifecycle handler for ``powerdns_zone`` resources."""

    type_name = RESOURCE_TYPE

    def create(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        """Create the zone and store the server-assigned id.

        Client errors propagate unchanged.
        """
        config = data.config
        zone_info = ZoneInfo(
            name=config.name,
            kind=config.kind,
            nameservers=sorted(config.nameservers),
        )

        created = client.create_zone(zone_info)
        data.set_id(created.id)
        pdns_logger.info(
            f"Created PowerDNS Zone: {created.name}",
            resource=RESOURCE_TYPE, operation="create", resource_id=created.id,
        )

    def read(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        pdns_logger.debug(
            f"Reading PowerDNS Zone: {data.id}",
            resource=RESOURCE_TYPE, operation="read", resource_id=data.id,
        )
        try:
            zone_info = client.get_zone(data.config.name)
        except ProviderError as e:
            raise _zone_error(f"Couldn't fetch PowerDNS Zone: {e}", "read", data.id) from e

        # nameservers are not refreshed here
        data.set(name=zone_info.name, kind=zone_info.kind)

    def update(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        """Send the new ``kind`` if, and only if, it changed."""
        pdns_logger.debug(
            f"Updating PowerDNS Zone: {data.id}",
            resource=RESOURCE_TYPE, operation="update", resource_id=data.id,
        )
        if not data.has_change("kind"):
            return
        client.update_zone(data.id, ZoneInfo(kind=data.config.kind))

    def delete(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        pdns_logger.info(
            f"Deleting PowerDNS Zone: {data.id}",
            resource=RESOURCE_TYPE, operation="delete", resource_id=data.id,
        )
        try:
            client.delete_zone(data.id)
        except ProviderError as e:
            raise _zone_error(f"Error deleting PowerDNS Zone: {e}", "delete", data.id) from e

    def exists(self, data: ResourceData, client: PowerDNSClientBlueprint) -> bool:
        name = data.config.name
        pdns_logger.info(
            f"Checking existence of PowerDNS Zone: {name}",
            resource=RESOURCE_TYPE, operation="exists", resource_id=data.id,
        )
        try:
            return client.zone_exists(name)
        except ProviderError as e:
            raise _zone_error(f"Error checking PowerDNS Zone: {e}", "exists", data.id) from e

    def import_state(
        self, data: ResourceData, client: PowerDNSClientBlueprint
    ) -> list[ResourceData]:
        """Populate the full configuration from the zone named in ``data.id``.

        Raises:
            ImportParseError: ``data.id`` is not a JSON object of strings.
            MissingFieldError: The object has no ``name`` key.
            ZoneError: The zone or its NS rrset could not be fetched.
        """
        fields = parse_import_id(data.id)
        if "name" not in fields:
            raise MissingFieldError("missing zone name in input data")
        zone_name = fields["name"]

        pdns_logger.info(
            f"importing PowerDNS Zone: {zone_name}",
            resource=RESOURCE_TYPE, operation="import", resource_id=zone_name,
        )

        try:
            zone = client.get_zone(zone_name)
        except ProviderError as e:
            raise _zone_error(
                f"couldn't fetch zone {zone_name} from PowerDNS: {e}", "import", zone_name
            ) from e

        try:
            ns_records = client.list_records_in_rrset(zone_name, zone_name, "NS")
        except ProviderError as e:
            raise _zone_error(
                f"couldn't fetch zone {zone_name} nameservers from PowerDNS: {e}",
                "import",
                zone_name,
            ) from e

        data.set(
            name=zone.name,
            kind=zone.kind,
            nameservers=frozenset(r.content for r in ns_records),
        )
        data.set_id(zone_name)
        return [data]
