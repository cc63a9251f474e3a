"""Shared fixtures for netcfg tests."""

import pytest

from model import WiFiEncryptionType, WiFiNetwork, WiFiSettings


class FakeClient:
    """Stands in for DeviceClient; records saves instead of sending them."""

    base_url = "http://device.test"

    def __init__(self, settings=None, networks=None, fail_save=None):
        self.settings = settings if settings is not None else WiFiSettings()
        self.networks = networks or []
        self.fail_save = fail_save
        self.saved_payloads = []
        self.load_count = 0

    def get_wifi_settings(self):
        self.load_count += 1
        return self.settings.copy()

    def update_wifi_settings(self, payload):
        if self.fail_save is not None:
            raise self.fail_save
        self.saved_payloads.append(payload)
        return WiFiSettings(**payload)

    def discover_networks(self):
        return list(self.networks)


@pytest.fixture
def valid_settings():
    """Settings that pass validation in manual DHCP mode."""
    return WiFiSettings(ssid="HomeNet", password="hunter22", hostname="device-01")


@pytest.fixture
def static_settings():
    """Valid settings with a complete static IP configuration."""
    return WiFiSettings(
        ssid="HomeNet",
        password="hunter22",
        hostname="device-01",
        static_ip_config=True,
        local_ip="192.168.1.50",
        gateway_ip="192.168.1.1",
        subnet_mask="255.255.255.0",
        dns_ip_1="1.1.1.1",
    )


@pytest.fixture
def open_network():
    """A scanned network without encryption."""
    return WiFiNetwork(ssid="CoffeeShop", encryption_type=WiFiEncryptionType.OPEN, channel=6, rssi=-60)


@pytest.fixture
def secured_network():
    """A scanned WPA2 network."""
    return WiFiNetwork(ssid="Office", encryption_type=WiFiEncryptionType.WPA2_PSK, channel=11, rssi=-48)


@pytest.fixture
def fake_client(valid_settings):
    """FakeClient serving valid settings."""
    return FakeClient(settings=valid_settings)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path, monkeypatch):
    """Keep config lookups and env overrides away from the real user."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.delenv("NETCFG_DEVICE", raising=False)
    monkeypatch.delenv("NETCFG_TOKEN", raising=False)
    monkeypatch.delenv("NETCFG_TIMEOUT", raising=False)
