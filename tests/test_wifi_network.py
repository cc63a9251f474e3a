"""Tests for scanned network model and settings descriptors."""

import pytest

from model import SECURITY_MODE_LABELS, WiFiEncryptionType, WiFiNetwork, WiFiSettings
from ui.widgets import signal_bars


class TestWiFiEncryptionType:
    """Tests for WiFiEncryptionType."""

    def test_from_known_code(self):
        """Known codes map to members."""
        assert WiFiEncryptionType.from_code(3) is WiFiEncryptionType.WPA2_PSK

    def test_from_unknown_code(self):
        """Unknown codes map to UNKNOWN."""
        assert WiFiEncryptionType.from_code(99) is WiFiEncryptionType.UNKNOWN

    def test_every_member_labelled(self):
        """Every member has a display label."""
        assert set(SECURITY_MODE_LABELS) == set(WiFiEncryptionType)


class TestWiFiNetwork:
    """Tests for WiFiNetwork."""

    def test_open(self, open_network):
        """OPEN encryption means an open network."""
        assert open_network.is_open is True
        assert open_network.security_mode == "None"

    def test_secured(self, secured_network):
        """Any other encryption is secured."""
        assert secured_network.is_open is False

    def test_describe(self, secured_network):
        """Description shows security and channel."""
        assert secured_network.describe() == "Security: WPA2, Ch: 11"

    def test_frozen(self, open_network):
        """Networks are immutable."""
        with pytest.raises(AttributeError):
            open_network.ssid = "other"

    def test_equality(self):
        """Networks with the same data are equal."""
        assert WiFiNetwork(ssid="a", channel=1) == WiFiNetwork(ssid="a", channel=1)


class TestSignalBars:
    """Tests for signal_bars."""

    @pytest.mark.parametrize("rssi,bars", [(-40, 4), (-60, 3), (-75, 2), (-90, 1)])
    def test_bars(self, rssi, bars):
        """Stronger signals light more bars."""
        assert len(signal_bars(rssi).strip()) == bars


class TestWiFiSettings:
    """Tests for WiFiSettings descriptors."""

    def test_defaults(self):
        """Fresh settings are empty with DHCP."""
        settings = WiFiSettings()
        assert settings.ssid == ""
        assert settings.static_ip_config is False

    def test_class_access_returns_field(self):
        """Class attribute access gives the field metadata."""
        assert WiFiSettings.password.secret is True
        assert WiFiSettings.hostname.input_id == "opt-hostname"

    def test_field_order(self):
        """Fields are registered in declaration order."""
        assert list(WiFiSettings.get_ui_fields()) == [
            "ssid", "password", "hostname", "static_ip_config",
            "local_ip", "gateway_ip", "subnet_mask", "dns_ip_1", "dns_ip_2",
        ]

    def test_unknown_kwargs_ignored(self):
        """Constructor ignores names that aren't fields."""
        assert WiFiSettings(channel=6) == WiFiSettings()

    def test_copy_is_independent(self, valid_settings):
        """Copies don't share state."""
        other = valid_settings.copy()
        other.ssid = "changed"
        assert valid_settings.ssid == "HomeNet"
        assert other != valid_settings
