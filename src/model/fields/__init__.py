"""UIField definitions organized by form section.

This package contains all UIField definitions split by functional area.
"""

# Wireless network and device identity
from model.fields.wifi import (
    ssid,
    password,
    hostname,
)

# Static IP assignment
from model.fields.static_ip import (
    static_ip_config,
    local_ip,
    gateway_ip,
    subnet_mask,
    dns_ip_1,
    dns_ip_2,
)
