"""PowerDNS API data transfer objects.

Instances are built per API call and discarded afterwards. Request bodies
are dumped with ``exclude_unset`` so only explicitly assigned fields go
over the wire.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class RecordContent(BaseModel):
    """A single record inside a PowerDNS rrset."""

    model_config = ConfigDict(extra="ignore")

    content: str
    disabled: bool = False


class ResourceRecordSet(BaseModel):
    """A PowerDNS rrset: every record sharing a name and type."""

    model_config = ConfigDict(extra="ignore")

    name: str
    type: str
    ttl: int = 0
    records: list[RecordContent] = Field(default_factory=list)


class Record(BaseModel):
    """A flattened DNS record.

    The legacy (pre-v1) API returns zones with a flat ``records`` list in
    this shape; v1 rrsets are flattened into it by the client.
    """

    model_config = ConfigDict(extra="ignore")

    name: str
    type: str
    content: str
    ttl: int = 0
    disabled: bool = False


class ZoneInfo(BaseModel):
    """Remote representation of a PowerDNS zone.

    Used both as the create-request payload and the read-response payload.
    """

    model_config = ConfigDict(extra="ignore")

    id: str = ""
    name: str = ""
    kind: str = ""
    nameservers: list[str] = Field(default_factory=list)
    url: str | None = None
    serial: int | None = None
    dnssec: bool | None = None
    masters: list[str] | None = None
    rrsets: list[ResourceRecordSet] | None = None
    records: list[Record] | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize only the fields that were explicitly set."""
        return self.model_dump(exclude_unset=True)

    def flat_records(self) -> list[Record]:
        """Return every record in the zone as a flat list."""
        if self.rrsets is not None:
            return [
                Record(
                    name=rrset.name,
                    type=rrset.type,
                    ttl=rrset.ttl,
                    content=rc.content,
                    disabled=rc.disabled,
                )
                for rrset in self.rrsets
                for rc in rrset.records
            ]
        return list(self.records or [])
