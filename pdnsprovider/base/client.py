"""PowerDNS API client blueprint."""

from abc import ABC, abstractmethod

from pdnsprovider.base.models import Record, ZoneInfo


class PowerDNSClientBlueprint(ABC):
    """Abstract interface for the PowerDNS zone API.

    Resource handlers only depend on this capability set, so tests and
    alternative transports can stand in for the HTTP client.
    """

    # --- Zone lifecycle ---

    @abstractmethod
    def create_zone(self, zone: ZoneInfo) -> ZoneInfo:
        """Create a zone and return the remote representation.

        Args:
            zone: Zone payload; ``name``, ``kind`` and ``nameservers`` are sent.

        Returns:
            The created zone, including the remote-assigned ``id``.
        """

    @abstractmethod
    def get_zone(self, name: str) -> ZoneInfo:
        """Fetch a zone by name.

        Raises:
            ZoneNotFoundError: If the zone does not exist.
        """

    @abstractmethod
    def update_zone(self, zone_id: str, zone: ZoneInfo) -> None:
        """Update zone metadata. Only fields set on *zone* are sent."""

    @abstractmethod
    def delete_zone(self, zone_id: str) -> None:
        """Delete a zone."""

    @abstractmethod
    def zone_exists(self, name: str) -> bool:
        """Report whether a zone exists.

        Transport and API errors are raised, never reported as ``False``.
        """

    # --- Records ---

    @abstractmethod
    def list_records_in_rrset(self, zone: str, name: str, record_type: str) -> list[Record]:
        """List the records of one rrset.

        Args:
            zone: Zone name (e.g. ``example.com.``).
            name: FQDN of the rrset.
            record_type: Record type (NS, A, …).
        """
