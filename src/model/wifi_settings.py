"""WiFi settings model: the editable record submitted to the device."""

from __future__ import annotations

from model import fields
from model.ui_field import ConfigBase

# Fields that only take part in validation while static_ip_config is set
STATIC_IP_FIELDS = ("local_ip", "gateway_ip", "subnet_mask", "dns_ip_1", "dns_ip_2")


class WiFiSettings(ConfigBase):
    """Network settings being edited.

    Field names match the device's REST API. Static IP values are kept even
    while static_ip_config is off so re-enabling it restores what was typed.
    """

    ssid = fields.ssid
    password = fields.password
    hostname = fields.hostname
    static_ip_config = fields.static_ip_config
    local_ip = fields.local_ip
    gateway_ip = fields.gateway_ip
    subnet_mask = fields.subnet_mask
    dns_ip_1 = fields.dns_ip_1
    dns_ip_2 = fields.dns_ip_2

    def copy(self) -> WiFiSettings:
        """Independent copy with the same values."""
        return WiFiSettings(**self.values())
