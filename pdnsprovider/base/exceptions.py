"""
PowerDNS provider exception hierarchy.

Every failure surfaced to the host runtime inherits from
:class:`ProviderError`. API failures carry the HTTP status code, handler
failures wrap the underlying client error with operation context.
"""


# ── Base ──────────────────────────────────────────────────────────────
class ProviderError(Exception):
    """Root exception for all provider errors."""


class ConfigurationError(ProviderError):
    """Provider configuration is invalid or incomplete."""


class StateError(ProviderError):
    """Declarative state is missing required fields or is malformed."""


# ── PowerDNS API ──────────────────────────────────────────────────────
class PowerDNSAPIError(ProviderError):
    """The PowerDNS API rejected a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ZoneNotFoundError(PowerDNSAPIError):
    """DNS zone not found."""


class ZoneAlreadyExistsError(PowerDNSAPIError):
    """DNS zone already exists."""


class PowerDNSConnectionError(PowerDNSAPIError):
    """The PowerDNS API could not be reached."""


# ── Zone resource ─────────────────────────────────────────────────────
class ZoneError(ProviderError):
    """A zone lifecycle operation failed."""


# ── Import ────────────────────────────────────────────────────────────
class ImportInputError(ProviderError):
    """Base exception for malformed import identifiers."""


class ImportParseError(ImportInputError):
    """Import identifier is not a flat JSON object of strings."""


class MissingFieldError(ImportInputError):
    """Import identifier lacks a required key."""
