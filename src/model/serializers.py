"""Conversion between settings objects and the device's JSON payloads.

The device speaks plain JSON objects whose keys are the UIField names, so
serialization walks the descriptors rather than hard-coding keys.
"""

from __future__ import annotations

import logging
from typing import Any

from model.ui_field import UIField
from model.wifi_network import WiFiEncryptionType, WiFiNetwork
from model.wifi_settings import STATIC_IP_FIELDS, WiFiSettings

log = logging.getLogger(__name__)


class PayloadError(Exception):
    """Raised when a payload from the device cannot be interpreted."""


# =============================================================================
# WiFi Settings
# =============================================================================

def to_payload(settings: WiFiSettings) -> dict[str, Any]:
    """Serialize settings to the JSON object the device accepts.

    Every field is included, static IP fields too, whether or not they are
    currently active.
    """
    return settings.values()


def from_payload(data: Any) -> WiFiSettings:
    """Build settings from a device payload.

    Missing keys take the field default and unknown keys are ignored, since
    firmware versions differ in what they send.
    """
    if not isinstance(data, dict):
        raise PayloadError(f"Expected a JSON object, got {type(data).__name__}")

    kwargs = {}
    for name, field in WiFiSettings.get_ui_fields().items():
        if name not in data:
            continue
        kwargs[name] = _deserialize_field_value(data[name], field)

    unknown = set(data) - set(WiFiSettings.get_ui_fields())
    if unknown:
        log.debug(f"Ignoring unknown settings keys: {sorted(unknown)}")

    return WiFiSettings(**kwargs)


def _deserialize_field_value(value: Any, field: UIField) -> Any:
    """Coerce a payload value to the field's type."""
    if value is None:
        return field.default

    if field.type_ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, str)) and str(value).lower() in ("0", "1", "true", "false"):
            return str(value).lower() in ("1", "true")
        raise PayloadError(f"Field '{field.name}': expected a boolean")

    if field.type_ is str:
        if isinstance(value, (dict, list, bool)):
            raise PayloadError(f"Field '{field.name}': expected a string")
        return str(value)

    return value


# =============================================================================
# Network Scan Results
# =============================================================================

def network_from_payload(data: Any) -> WiFiNetwork:
    """Build a WiFiNetwork from one entry of a scan result."""
    if not isinstance(data, dict) or "ssid" not in data:
        raise PayloadError("Network entry must be an object with an 'ssid'")
    try:
        return WiFiNetwork(
            ssid=str(data["ssid"]),
            encryption_type=WiFiEncryptionType.from_code(int(data.get("encryption_type", 0))),
            channel=int(data.get("channel", 0)),
            rssi=int(data.get("rssi", 0)),
            bssid=str(data.get("bssid", "")),
        )
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Malformed network entry for '{data['ssid']}': {e}") from e


def networks_from_payload(data: Any) -> list[WiFiNetwork]:
    """Parse a network list response, strongest signal first."""
    if not isinstance(data, dict) or not isinstance(data.get("networks"), list):
        raise PayloadError("Expected an object with a 'networks' list")
    networks = [network_from_payload(entry) for entry in data["networks"]]
    return sorted(networks, key=lambda n: n.rssi, reverse=True)


# =============================================================================
# Summaries
# =============================================================================

def settings_to_summary(settings: WiFiSettings, ssid: str | None = None) -> str:
    """Human-readable multi-line summary, password redacted.

    Args:
        settings: Settings to describe
        ssid: SSID that will actually be sent, when a selected network
            overrides the one in settings
    """
    values = settings.redacted()
    if ssid is not None:
        values["ssid"] = ssid
    lines = []
    for name, value in values.items():
        field = WiFiSettings.get_ui_fields()[name]
        if name in STATIC_IP_FIELDS and not settings.static_ip_config:
            continue
        if field.type_ is bool:
            value = "yes" if value else "no"
        lines.append(f"{field.label.rstrip('?')}: {value if value != '' else '-'}")
    return "\n".join(lines)
