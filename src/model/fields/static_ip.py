"""UIField definitions for the Static IP section."""

from model.ui_field import UIField


def _named(name: str, field: UIField) -> UIField:
    """Set the name attribute on a UIField and return it."""
    field.name = name
    return field


static_ip_config = _named("static_ip_config", UIField(
    bool, False, "opt-static-ip",
    "Static IP Config?", "Use a fixed address instead of DHCP",
))

local_ip = _named("local_ip", UIField(
    str, "", "opt-local-ip",
    "Local IP", "Address assigned to the device",
    placeholder="192.168.1.50",
))

gateway_ip = _named("gateway_ip", UIField(
    str, "", "opt-gateway-ip",
    "Gateway", "Router address",
    placeholder="192.168.1.1",
))

subnet_mask = _named("subnet_mask", UIField(
    str, "", "opt-subnet-mask",
    "Subnet", "Network mask",
    placeholder="255.255.255.0",
))

dns_ip_1 = _named("dns_ip_1", UIField(
    str, "", "opt-dns-ip-1",
    "DNS IP #1", "Primary DNS server (optional)",
))

dns_ip_2 = _named("dns_ip_2", UIField(
    str, "", "opt-dns-ip-2",
    "DNS IP #2", "Secondary DNS server (optional)",
))
