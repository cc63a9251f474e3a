"""WiFi settings tab composition."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, VerticalScroll
from textual.widgets import Label

from model import WiFiNetwork, WiFiSettings
from model import fields
from ui.widgets import FieldRow, OptionCard, SelectedNetworkCard
import ui.ids as ids


def compose_wifi_tab(settings: WiFiSettings, selected: WiFiNetwork | None) -> ComposeResult:
    """Compose the WiFi settings form.

    Every field is composed up front; which ones are visible is decided
    afterwards from the active schema, so hidden values stay in their inputs.

    Args:
        settings: Settings to prefill the inputs with
        selected: Network currently picked from a scan, if any

    Yields:
        Textual widgets for the WiFi tab
    """
    with VerticalScroll(id=ids.WIFI_TAB_CONTENT):
        with Container(classes="options-section"):
            yield Label("Network", classes="section-label")
            yield SelectedNetworkCard(selected)
            yield FieldRow(fields.ssid, settings.ssid)
            yield FieldRow(fields.password, settings.password)

        with Container(classes="options-section"):
            yield Label("Device", classes="section-label")
            yield FieldRow(fields.hostname, settings.hostname)
            yield OptionCard(fields.static_ip_config, settings.static_ip_config)
            with Container(id=ids.STATIC_IP_OPTIONS, classes="" if settings.static_ip_config else "hidden"):
                for field in (
                    fields.local_ip,
                    fields.gateway_ip,
                    fields.subnet_mask,
                    fields.dns_ip_1,
                    fields.dns_ip_2,
                ):
                    yield FieldRow(field, getattr(settings, field.name))
