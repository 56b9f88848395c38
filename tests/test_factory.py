from unittest.mock import patch, MagicMock
import pytest

from pdnsprovider.base.exceptions import ConfigurationError
from pdnsprovider.factory import client_factory, resource_factory
from pdnsprovider.base import PowerDNSClientBlueprint, ResourceBlueprint
from pdnsprovider.powerdns import ZoneResource


class TestResourceFactory:
    def test_zone(self):
        result = resource_factory("powerdns_zone")
        assert isinstance(result, ZoneResource)
        assert isinstance(result, ResourceBlueprint)
        assert result.type_name == "powerdns_zone"

    def test_unsupported_resource(self):
        with pytest.raises(ValueError, match="Unsupported resource type"):
            resource_factory("powerdns_record")


class TestClientFactory:
    @patch("pdnsprovider.powerdns.client.requests")
    def test_builds_client(self, mock_requests):
        mock_requests.Session.return_value = MagicMock()
        result = client_factory({"server_url": "http://pdns:8081", "api_key": "k"})
        assert isinstance(result, PowerDNSClientBlueprint)

    def test_invalid_config(self, monkeypatch):
        monkeypatch.delenv("PDNS_API_KEY", raising=False)
        monkeypatch.delenv("PDNS_SERVER_URL", raising=False)
        with pytest.raises(ConfigurationError, match="Invalid provider config"):
            client_factory({})

    def test_non_mapping_config(self):
        with pytest.raises(ConfigurationError, match="expected a JSON object"):
            client_factory([])
