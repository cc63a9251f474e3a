"""Model classes for netcfg."""

from model.ui_field import ConfigBase, UIField
from model.wifi_network import SECURITY_MODE_LABELS, WiFiEncryptionType, WiFiNetwork
from model.wifi_settings import STATIC_IP_FIELDS, WiFiSettings

__all__ = [
    "ConfigBase",
    "UIField",
    "SECURITY_MODE_LABELS",
    "STATIC_IP_FIELDS",
    "WiFiEncryptionType",
    "WiFiNetwork",
    "WiFiSettings",
]
