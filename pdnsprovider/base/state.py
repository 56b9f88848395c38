"""
Declarative state container for managed resources.

:class:`ZoneConfiguration` is the user-authored declaration with a fixed,
statically typed schema. :class:`ResourceData` wraps the current
declaration together with the last-known state and the resource identity,
and answers the per-field change questions the lifecycle operations ask.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_serializer

from pdnsprovider.base.exceptions import StateError

ZoneField = Literal["name", "kind", "nameservers"]


class ZoneConfiguration(BaseModel):
    """Declared configuration of a PowerDNS zone.

    ``name`` and ``nameservers`` are write-once: a change to either forces
    the resource to be destroyed and recreated. ``kind`` is updated in place.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    name: str = Field(default="", json_schema_extra={"required": True, "force_new": True})
    kind: str = Field(default="", json_schema_extra={"required": True})
    nameservers: frozenset[str] = Field(
        default_factory=frozenset,
        json_schema_extra={"required": True, "force_new": True},
    )

    @field_serializer("nameservers")
    def serialize_nameservers(self, nameservers: frozenset[str]) -> list[str]:
        return sorted(nameservers)

    @classmethod
    def _fields_marked(cls, marker: str) -> list[str]:
        return [
            name
            for name, info in cls.model_fields.items()
            if isinstance(info.json_schema_extra, dict) and info.json_schema_extra.get(marker)
        ]

    @classmethod
    def force_new_fields(cls) -> list[str]:
        """Fields whose change forces destroy and recreate."""
        return cls._fields_marked("force_new")

    def missing_required(self) -> list[str]:
        """Names of required fields that are still empty."""
        return [name for name in self._fields_marked("required") if not getattr(self, name)]


class ResourceData:
    """State of one managed resource instance as seen by a lifecycle call.

    Attributes:
        config: Current declared (or refreshed) configuration.
        prior: Last-known configuration, or ``None`` before the first apply.
    """

    def __init__(
        self,
        config: ZoneConfiguration | None = None,
        *,
        prior: ZoneConfiguration | None = None,
        id: str = "",
    ) -> None:
        self.config = config if config is not None else ZoneConfiguration()
        self.prior = prior
        self._id = id

    @property
    def id(self) -> str:
        """Resource identity; empty until create or import assigns one."""
        return self._id

    def set_id(self, value: str) -> None:
        self._id = value

    def set(self, **fields: Any) -> None:
        """Assign several configuration fields, validating each.

        Raises:
            StateError: If a field is unknown or a value has the wrong type.
        """
        for name, value in fields.items():
            if name not in ZoneConfiguration.model_fields:
                raise StateError(f"Unknown zone field '{name}'")
            try:
                setattr(self.config, name, value)
            except ValidationError as e:
                raise StateError(f"Invalid value for zone field '{name}': {e}") from e

    def has_change(self, field: ZoneField) -> bool:
        """Whether *field* differs from its last-known value."""
        prior = self.prior if self.prior is not None else ZoneConfiguration()
        return getattr(self.config, field) != getattr(prior, field)

    def requires_replacement(self) -> list[str]:
        """Force-new fields that changed since the last-known state."""
        if self.prior is None:
            return []
        return [f for f in ZoneConfiguration.force_new_fields() if self.has_change(f)]  # type: ignore[arg-type]

    # --- Serialization ---

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "config": self.config.model_dump(),
            "prior": self.prior.model_dump() if self.prior is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResourceData:
        """Rebuild a :class:`ResourceData` from :meth:`to_dict` output.

        Raises:
            StateError: If the payload does not match the zone schema.
        """
        if not isinstance(data, dict):
            raise StateError("Invalid resource state: expected a JSON object")
        try:
            config = ZoneConfiguration.model_validate(data.get("config") or {})
            prior_raw = data.get("prior")
            prior = ZoneConfiguration.model_validate(prior_raw) if prior_raw is not None else None
        except ValidationError as e:
            raise StateError(f"Invalid resource state: {e}") from e
        return cls(config, prior=prior, id=str(data.get("id") or ""))

    def __repr__(self) -> str:
        return f"ResourceData(id={self._id!r}, config={self.config!r}, prior={self.prior!r})"
