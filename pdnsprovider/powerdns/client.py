"""PowerDNS HTTP API implementation of the client blueprint."""

from __future__ import annotations

from typing import Any, NoReturn

import requests
from pydantic import ValidationError
from requests.exceptions import RequestException

from pdnsprovider.base.client import PowerDNSClientBlueprint
from pdnsprovider.base.config import PowerDNSConfig
from pdnsprovider.base.exceptions import (
    PowerDNSAPIError,
    PowerDNSConnectionError,
    ZoneAlreadyExistsError,
    ZoneNotFoundError,
)
from pdnsprovider.base.logger import pdns_logger
from pdnsprovider.base.models import Record, ZoneInfo

_ERROR_MAP: dict[int, type[PowerDNSAPIError]] = {
    404: ZoneNotFoundError,
    409: ZoneAlreadyExistsError,
}


def _handle(resp: requests.Response, msg: str) -> NoReturn:
    try:
        body = resp.json()
    except ValueError:
        body = None
    detail = body.get("error") if isinstance(body, dict) else None
    detail = detail or resp.text or resp.reason
    exc = _ERROR_MAP.get(resp.status_code, PowerDNSAPIError)
    raise exc(f"{msg}: {detail} (HTTP {resp.status_code})", status_code=resp.status_code)


def sanitize_url(server_url: str) -> str:
    """Return *server_url* with a scheme and without a trailing slash."""
    url = server_url.strip()
    if "://" not in url:
        url = f"https://{url}"
    return url.rstrip("/")


class PowerDNSClient(PowerDNSClientBlueprint):
    """PowerDNS authoritative server API client.

    Attributes:
        session: requests session carrying the API key header.
        server_url: Sanitized base URL of the server.
        server_id: PowerDNS server identifier (usually ``localhost``).
    """

    def __init__(self, config: PowerDNSConfig) -> None:
        """Initialize the HTTP session.

        Args:
            config: Provider configuration. ``api_version`` left unset means
                the version is detected on the first request.
        """
        self.server_url = sanitize_url(config.server_url)
        self.server_id = config.server_id
        self.timeout = config.timeout
        self._api_version = config.api_version

        self.session = requests.Session()
        self.session.headers.update(
            {
                "X-API-Key": config.api_key,
                "Content-Type": "application/json",
                "Accept": "application/json",
            }
        )
        if config.insecure_https:
            self.session.verify = False
        elif config.ca_certificate:
            self.session.verify = config.ca_certificate

    # --- Transport ---

    @property
    def api_version(self) -> int:
        """API version in use, detected once and memoised."""
        if self._api_version is None:
            self._api_version = self._detect_api_version()
        return self._api_version

    def _detect_api_version(self) -> int:
        url = f"{self.server_url}/api/v1/servers"
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except RequestException as e:
            raise PowerDNSConnectionError(f"Failed to reach PowerDNS at {self.server_url}: {e}") from e
        if resp.status_code == 200:
            version = 1
        elif resp.status_code == 404:
            version = 0
        else:
            _handle(resp, f"Failed to detect PowerDNS API version at {self.server_url}")
        pdns_logger.debug(f"Detected PowerDNS API version {version} at {self.server_url}")
        return version

    def _url(self, path: str) -> str:
        prefix = "/api/v1" if self.api_version == 1 else ""
        return f"{self.server_url}{prefix}{path}"

    def _zones_path(self, zone: str | None = None) -> str:
        path = f"/servers/{self.server_id}/zones"
        return f"{path}/{zone}" if zone else path

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = self._url(path)
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except RequestException as e:
            raise PowerDNSConnectionError(f"{method} {url} failed: {e}") from e

    @staticmethod
    def _parse_zone(resp: requests.Response, msg: str) -> ZoneInfo:
        try:
            return ZoneInfo.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise PowerDNSAPIError(f"{msg}: unexpected response body", status_code=resp.status_code) from e

    # --- Zone lifecycle ---

    def create_zone(self, zone: ZoneInfo) -> ZoneInfo:
        """Create a zone.

        Returns:
            The created zone as reported by the server.

        Raises:
            ZoneAlreadyExistsError: If a zone with the same name exists.
            PowerDNSAPIError: On any other API failure.
        """
        resp = self._request("POST", self._zones_path(), json=zone.to_payload())
        if resp.status_code not in (200, 201):
            _handle(resp, f"Failed to create zone '{zone.name}'")
        return self._parse_zone(resp, f"Failed to create zone '{zone.name}'")

    def get_zone(self, name: str) -> ZoneInfo:
        resp = self._request("GET", self._zones_path(name))
        if resp.status_code != 200:
            _handle(resp, f"Failed to get zone '{name}'")
        return self._parse_zone(resp, f"Failed to get zone '{name}'")

    def update_zone(self, zone_id: str, zone: ZoneInfo) -> None:
        """Update zone metadata; PowerDNS answers 204 on success."""
        resp = self._request("PUT", self._zones_path(zone_id), json=zone.to_payload())
        if resp.status_code not in (200, 204):
            _handle(resp, f"Failed to update zone '{zone_id}'")

    def delete_zone(self, zone_id: str) -> None:
        resp = self._request("DELETE", self._zones_path(zone_id))
        if resp.status_code not in (200, 204):
            _handle(resp, f"Failed to delete zone '{zone_id}'")

    def zone_exists(self, name: str) -> bool:
        resp = self._request("GET", self._zones_path(name))
        if resp.status_code == 200:
            return True
        if resp.status_code == 404:
            return False
        _handle(resp, f"Failed to check zone '{name}'")

    # --- Records ---

    def list_records(self, zone: str) -> list[Record]:
        """List every record in *zone*, flattened from its rrsets."""
        return self.get_zone(zone).flat_records()

    def list_records_in_rrset(self, zone: str, name: str, record_type: str) -> list[Record]:
        return [
            r for r in self.list_records(zone)
            if r.name == name and r.type == record_type
        ]
