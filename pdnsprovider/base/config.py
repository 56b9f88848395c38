"""
Pydantic configuration model for the PowerDNS provider.

Validates provider settings at initialization time instead of
silently passing bad values to the HTTP client.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class PowerDNSConfig(BaseModel):
    """Configuration for the PowerDNS HTTP API.

    Settings are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (PDNS_SERVER_URL, PDNS_API_KEY, PDNS_SERVER_ID,
       PDNS_INSECURE_HTTPS, PDNS_CACERT).
    3. Field defaults.
    """

    model_config = ConfigDict(extra="forbid")

    server_url: str = Field(description="Base URL of the PowerDNS server")
    api_key: str = Field(description="PowerDNS API key (X-API-Key)")
    server_id: str = Field(default="localhost", description="PowerDNS server identifier")
    insecure_https: bool = Field(default=False, description="Skip TLS certificate checks")
    ca_certificate: str | None = Field(
        default=None, description="Path to a CA bundle used to verify the server"
    )
    api_version: Literal[0, 1] | None = Field(
        default=None, description="Force the API version instead of probing the server"
    )
    timeout: float | None = Field(default=30.0, description="Request timeout in seconds")

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing settings."""
        env_map = {
            "server_url": "PDNS_SERVER_URL",
            "api_key": "PDNS_API_KEY",
            "server_id": "PDNS_SERVER_ID",
            "insecure_https": "PDNS_INSECURE_HTTPS",
            "ca_certificate": "PDNS_CACERT",
        }
        for field, env_var in env_map.items():
            if values.get(field) in (None, "") and os.environ.get(env_var):
                values[field] = os.environ[env_var]
        return values

    @model_validator(mode="after")
    def validate_server_and_certificate(self) -> PowerDNSConfig:
        """Ensure the server URL is usable and the CA bundle exists."""
        if not self.server_url.strip():
            raise ValueError(
                "PowerDNS server_url is required. Set it explicitly or via "
                "the PDNS_SERVER_URL environment variable."
            )
        if self.ca_certificate and not Path(self.ca_certificate).exists():
            raise ValueError(f"CA certificate file not found: {self.ca_certificate}")
        return self


def validate_config(config: dict) -> PowerDNSConfig:
    """Validate and return a typed provider config.

    Args:
        config: Raw configuration dictionary.

    Returns:
        A validated :class:`PowerDNSConfig`.

    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    return PowerDNSConfig(**config)


__all__ = [
    "PowerDNSConfig",
    "validate_config",
]
