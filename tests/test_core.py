"""Tests for core infrastructure modules."""

import json
import logging
import pytest
from pydantic import ValidationError

from pdnsprovider.base.config import PowerDNSConfig, validate_config
from pdnsprovider.base.logger import ProviderLogger, StructuredFormatter


# ══════════════════════════════════════════════════════════════════════
# Config
# ══════════════════════════════════════════════════════════════════════

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("PDNS_SERVER_URL", "PDNS_API_KEY", "PDNS_SERVER_ID",
                "PDNS_INSECURE_HTTPS", "PDNS_CACERT"):
        monkeypatch.delenv(var, raising=False)


class TestPowerDNSConfig:
    def test_explicit_values(self):
        cfg = PowerDNSConfig(server_url="http://pdns:8081", api_key="secret")
        assert cfg.server_url == "http://pdns:8081"
        assert cfg.server_id == "localhost"
        assert cfg.insecure_https is False
        assert cfg.api_version is None

    def test_env_fallback(self, monkeypatch):
        monkeypatch.setenv("PDNS_SERVER_URL", "https://pdns.example.net")
        monkeypatch.setenv("PDNS_API_KEY", "env_key")
        monkeypatch.setenv("PDNS_INSECURE_HTTPS", "true")
        cfg = PowerDNSConfig()
        assert cfg.server_url == "https://pdns.example.net"
        assert cfg.api_key == "env_key"
        assert cfg.insecure_https is True

    def test_explicit_beats_env(self, monkeypatch):
        monkeypatch.setenv("PDNS_SERVER_ID", "env-server")
        cfg = PowerDNSConfig(server_url="http://pdns", api_key="k", server_id="primary")
        assert cfg.server_id == "primary"

    def test_missing_api_key(self):
        with pytest.raises(ValidationError):
            PowerDNSConfig(server_url="http://pdns")

    def test_blank_server_url(self):
        with pytest.raises(ValidationError, match="server_url is required"):
            PowerDNSConfig(server_url="  ", api_key="k")

    def test_ca_certificate_must_exist(self, tmp_path):
        with pytest.raises(ValidationError, match="CA certificate file not found"):
            PowerDNSConfig(server_url="http://pdns", api_key="k",
                           ca_certificate=str(tmp_path / "missing.pem"))
        bundle = tmp_path / "ca.pem"
        bundle.write_text("-----BEGIN CERTIFICATE-----\n")
        cfg = PowerDNSConfig(server_url="http://pdns", api_key="k", ca_certificate=str(bundle))
        assert cfg.ca_certificate == str(bundle)

    def test_unknown_key_rejected(self):
        with pytest.raises(ValidationError):
            PowerDNSConfig(server_url="http://pdns", api_key="k", region="eu")


class TestValidateConfig:
    def test_returns_model(self):
        cfg = validate_config({"server_url": "http://pdns", "api_key": "k", "api_version": 1})
        assert isinstance(cfg, PowerDNSConfig)
        assert cfg.api_version == 1

    def test_invalid_api_version(self):
        with pytest.raises(ValidationError):
            validate_config({"server_url": "http://pdns", "api_key": "k", "api_version": 2})


# ══════════════════════════════════════════════════════════════════════
# Logger
# ══════════════════════════════════════════════════════════════════════

class TestProviderLogger:
    def test_log_operation(self, capfd):
        logger = ProviderLogger("test_pdns")
        logger.logger.setLevel(logging.DEBUG)
        logger.info("Deleting PowerDNS Zone: Z1", resource="powerdns_zone",
                    operation="delete", resource_id="Z1")
        captured = capfd.readouterr()
        entry = json.loads(captured.err.strip().splitlines()[-1])
        assert entry["message"] == "Deleting PowerDNS Zone: Z1"
        assert entry["operation"] == "delete"
        assert entry["resource_id"] == "Z1"
        assert len(entry["request_id"]) == 12

    def test_error_includes_exception(self, capfd):
        logger = ProviderLogger("test_pdns_errors")
        try:
            raise RuntimeError("connection refused")
        except RuntimeError:
            logger.error("Error deleting PowerDNS Zone", operation="delete", exc_info=True)
        entry = json.loads(capfd.readouterr().err.strip().splitlines()[-1])
        assert entry["level"] == "ERROR"
        assert entry["exception"] == "connection refused"

    def test_structured_formatter(self):
        fmt = StructuredFormatter()
        record = logging.LogRecord(
            name="test", level=logging.INFO, pathname="", lineno=0,
            msg="hi", args=(), exc_info=None,
        )
        record.resource = "powerdns_zone"
        record.request_id = "abc"
        output = fmt.format(record)
        assert '"resource": "powerdns_zone"' in output
        assert '"request_id": "abc"' in output
        assert "operation" not in output
