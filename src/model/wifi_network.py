"""Discovered wireless networks, as reported by the device's scan."""

from dataclasses import dataclass
from enum import Enum


class WiFiEncryptionType(Enum):
    """Auth mode codes reported by the device's WiFi stack."""

    OPEN = 0
    WEP = 1
    WPA_PSK = 2
    WPA2_PSK = 3
    WPA_WPA2_PSK = 4
    WPA2_ENTERPRISE = 5
    WPA3_PSK = 6
    WPA2_WPA3_PSK = 7
    UNKNOWN = -1

    @classmethod
    def from_code(cls, code: int) -> "WiFiEncryptionType":
        """Map a raw code to a member, UNKNOWN for anything unrecognised."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


SECURITY_MODE_LABELS = {
    WiFiEncryptionType.OPEN: "None",
    WiFiEncryptionType.WEP: "WEP",
    WiFiEncryptionType.WPA_PSK: "WPA",
    WiFiEncryptionType.WPA2_PSK: "WPA2",
    WiFiEncryptionType.WPA_WPA2_PSK: "WPA/WPA2",
    WiFiEncryptionType.WPA2_ENTERPRISE: "WPA2 Enterprise",
    WiFiEncryptionType.WPA3_PSK: "WPA3",
    WiFiEncryptionType.WPA2_WPA3_PSK: "WPA2/WPA3",
    WiFiEncryptionType.UNKNOWN: "Unknown",
}


@dataclass(frozen=True)
class WiFiNetwork:
    """A network found by a scan; the user may pick one to join.

    While picked, its SSID replaces the manually entered one.
    """

    ssid: str
    encryption_type: WiFiEncryptionType = WiFiEncryptionType.OPEN
    channel: int = 0
    rssi: int = 0  # dBm
    bssid: str = ""

    @property
    def is_open(self) -> bool:
        """True when the network advertises no encryption."""
        return self.encryption_type is WiFiEncryptionType.OPEN

    @property
    def security_mode(self) -> str:
        return SECURITY_MODE_LABELS[self.encryption_type]

    def describe(self) -> str:
        """One-line description for the selected-network card."""
        return f"Security: {self.security_mode}, Ch: {self.channel}"
