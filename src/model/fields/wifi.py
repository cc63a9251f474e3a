"""UIField definitions for the WiFi network section."""

from model.ui_field import UIField


def _named(name: str, field: UIField) -> UIField:
    """Set the name attribute on a UIField and return it."""
    field.name = name
    return field


ssid = _named("ssid", UIField(
    str, "", "opt-ssid",
    "SSID", "Network name to join (32 characters max)",
    placeholder="MyNetwork",
))

password = _named("password", UIField(
    str, "", "opt-password",
    "Password", "Network passphrase (64 characters max)",
    secret=True,
))

hostname = _named("hostname", UIField(
    str, "", "opt-hostname",
    "Hostname", "Name the device announces on the network",
    placeholder="device-01",
))
