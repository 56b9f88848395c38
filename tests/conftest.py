"""Shared fixtures: an in-memory PowerDNS client for lifecycle tests."""

import pytest

from pdnsprovider.base.client import PowerDNSClientBlueprint
from pdnsprovider.base.exceptions import ZoneAlreadyExistsError, ZoneNotFoundError
from pdnsprovider.base.models import Record, ZoneInfo
from pdnsprovider.base.state import ResourceData, ZoneConfiguration


class FakePowerDNS(PowerDNSClientBlueprint):
    """Keeps zones in a dict keyed by zone id; ids equal canonical names."""

    def __init__(self):
        self.zones: dict[str, ZoneInfo] = {}
        self.records: dict[str, list[Record]] = {}
        self.calls: list[str] = []

    def create_zone(self, zone):
        self.calls.append("create_zone")
        if zone.name in self.zones:
            raise ZoneAlreadyExistsError(f"Conflict: {zone.name}", status_code=409)
        created = zone.model_copy(update={"id": zone.name})
        self.zones[created.id] = created
        self.records[created.id] = [
            Record(name=zone.name, type="NS", content=ns, ttl=3600)
            for ns in zone.nameservers
        ]
        return created

    def get_zone(self, name):
        self.calls.append("get_zone")
        if name not in self.zones:
            raise ZoneNotFoundError(f"Could not find domain '{name}'", status_code=404)
        return self.zones[name]

    def update_zone(self, zone_id, zone):
        self.calls.append("update_zone")
        if zone_id not in self.zones:
            raise ZoneNotFoundError(f"Could not find domain '{zone_id}'", status_code=404)
        self.zones[zone_id] = self.zones[zone_id].model_copy(update=zone.to_payload())

    def delete_zone(self, zone_id):
        self.calls.append("delete_zone")
        if zone_id not in self.zones:
            raise ZoneNotFoundError(f"Could not find domain '{zone_id}'", status_code=404)
        del self.zones[zone_id]
        self.records.pop(zone_id, None)

    def zone_exists(self, name):
        self.calls.append("zone_exists")
        return name in self.zones

    def list_records_in_rrset(self, zone, name, record_type):
        self.calls.append("list_records_in_rrset")
        if zone not in self.zones:
            raise ZoneNotFoundError(f"Could not find domain '{zone}'", status_code=404)
        return [
            r for r in self.records.get(zone, [])
            if r.name == name and r.type == record_type
        ]


@pytest.fixture
def fake_pdns():
    return FakePowerDNS()


@pytest.fixture
def zone_data():
    return ResourceData(ZoneConfiguration(
        name="example.com.",
        kind="Native",
        nameservers=["ns1.example.com.", "ns2.example.com."],
    ))
