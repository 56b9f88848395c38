"""Resource lifecycle blueprint."""

from abc import ABC, abstractmethod

from pdnsprovider.base.client import PowerDNSClientBlueprint
from pdnsprovider.base.state import ResourceData


class ResourceBlueprint(ABC):
    """Abstract interface for a managed resource type.

    The host runtime invokes one operation at a time per resource instance.
    The API client and the state container are passed to every call;
    implementations hold no state of their own.
    """

    type_name: str

    @abstractmethod
    def create(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        """Create the remote object and assign the resource identity."""

    @abstractmethod
    def read(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        """Refresh *data* from the remote object."""

    @abstractmethod
    def update(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        """Apply in-place changes."""

    @abstractmethod
    def delete(self, data: ResourceData, client: PowerDNSClientBlueprint) -> None:
        """Delete the remote object."""

    @abstractmethod
    def exists(self, data: ResourceData, client: PowerDNSClientBlueprint) -> bool:
        """Report whether the remote object still exists."""

    @abstractmethod
    def import_state(
        self, data: ResourceData, client: PowerDNSClientBlueprint
    ) -> list[ResourceData]:
        """Reconstruct state from the raw identifier held in ``data.id``."""
