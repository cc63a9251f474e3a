"""Tests for settings and network payload serialization."""

import pytest

from constants import REDACTED
from model import WiFiEncryptionType, WiFiSettings
from model.serializers import (
    PayloadError,
    from_payload,
    network_from_payload,
    networks_from_payload,
    settings_to_summary,
    to_payload,
)


class TestSettingsPayload:
    """Tests for to_payload / from_payload."""

    def test_to_payload_has_every_field(self, static_settings):
        """All nine device keys are present."""
        payload = to_payload(static_settings)
        assert payload == {
            "ssid": "HomeNet",
            "password": "hunter22",
            "hostname": "device-01",
            "static_ip_config": True,
            "local_ip": "192.168.1.50",
            "gateway_ip": "192.168.1.1",
            "subnet_mask": "255.255.255.0",
            "dns_ip_1": "1.1.1.1",
            "dns_ip_2": "",
        }

    def test_round_trip(self, static_settings):
        """Settings survive a trip through the payload format."""
        assert from_payload(to_payload(static_settings)) == static_settings

    def test_missing_keys_default(self):
        """Keys the device didn't send take field defaults."""
        settings = from_payload({"ssid": "x"})
        assert settings.ssid == "x"
        assert settings.hostname == ""
        assert settings.static_ip_config is False

    def test_unknown_keys_ignored(self):
        """Extra keys from newer firmware are dropped."""
        settings = from_payload({"ssid": "x", "bssid": "aa:bb"})
        assert "bssid" not in settings.values()

    def test_null_takes_default(self):
        """null values take the field default."""
        assert from_payload({"dns_ip_1": None}).dns_ip_1 == ""

    @pytest.mark.parametrize("raw,expected", [(1, True), (0, False), ("true", True), ("False", False)])
    def test_bool_coercion(self, raw, expected):
        """Common boolean spellings are accepted."""
        assert from_payload({"static_ip_config": raw}).static_ip_config is expected

    def test_bad_bool(self):
        """Unrecognised boolean values are rejected."""
        with pytest.raises(PayloadError, match="static_ip_config"):
            from_payload({"static_ip_config": "maybe"})

    def test_bad_string(self):
        """Structured values in string fields are rejected."""
        with pytest.raises(PayloadError, match="hostname"):
            from_payload({"hostname": ["a"]})

    def test_not_an_object(self):
        """Top-level must be an object."""
        with pytest.raises(PayloadError):
            from_payload(["ssid"])


class TestNetworkPayload:
    """Tests for scan result parsing."""

    def test_network_entry(self):
        """A full entry maps onto WiFiNetwork."""
        network = network_from_payload({
            "ssid": "Office", "encryption_type": 3, "channel": 11, "rssi": -48, "bssid": "aa:bb:cc:dd:ee:ff",
        })
        assert network.ssid == "Office"
        assert network.encryption_type is WiFiEncryptionType.WPA2_PSK
        assert network.channel == 11
        assert network.rssi == -48

    def test_unknown_encryption_code(self):
        """Unrecognised codes become UNKNOWN."""
        network = network_from_payload({"ssid": "x", "encryption_type": 42})
        assert network.encryption_type is WiFiEncryptionType.UNKNOWN

    def test_missing_ssid(self):
        """Entries need an SSID."""
        with pytest.raises(PayloadError):
            network_from_payload({"rssi": -40})

    def test_malformed_number(self):
        """Non-numeric fields are reported."""
        with pytest.raises(PayloadError, match="x"):
            network_from_payload({"ssid": "x", "channel": "six"})

    def test_list_sorted_by_signal(self):
        """Strongest network comes first."""
        networks = networks_from_payload({"networks": [
            {"ssid": "weak", "rssi": -85},
            {"ssid": "strong", "rssi": -40},
            {"ssid": "mid", "rssi": -65},
        ]})
        assert [n.ssid for n in networks] == ["strong", "mid", "weak"]

    def test_list_requires_networks_key(self):
        """Response must wrap the list in 'networks'."""
        with pytest.raises(PayloadError):
            networks_from_payload([{"ssid": "x"}])


class TestSummary:
    """Tests for settings_to_summary."""

    def test_password_redacted(self, valid_settings):
        """Password never appears in the summary."""
        summary = settings_to_summary(valid_settings)
        assert "hunter22" not in summary
        assert f"Password: {REDACTED}" in summary

    def test_static_fields_hidden_when_off(self, valid_settings):
        """Inactive static fields are left out."""
        valid_settings.local_ip = "10.0.0.5"
        summary = settings_to_summary(valid_settings)
        assert "10.0.0.5" not in summary
        assert "Static IP Config: no" in summary

    def test_static_fields_shown_when_on(self, static_settings):
        """Active static fields are listed, empty ones as '-'."""
        summary = settings_to_summary(static_settings)
        assert "Local IP: 192.168.1.50" in summary
        assert "DNS IP #2: -" in summary

    def test_ssid_override(self):
        """A selected network's SSID replaces the empty typed one."""
        summary = settings_to_summary(WiFiSettings(hostname="device"), ssid="Office")
        assert "SSID: Office" in summary.splitlines()

    def test_repr_redacts(self, valid_settings):
        """repr() is safe to log."""
        assert "hunter22" not in repr(valid_settings)
        assert isinstance(valid_settings, WiFiSettings)
