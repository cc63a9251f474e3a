"""Network selection event handlers."""

from __future__ import annotations

import logging
from typing import Any, Callable

from textual import work

from client import DeviceError
from controller.session import SessionError
from model import WiFiNetwork

log = logging.getLogger(__name__)


class NetworkEventsMixin:
    """Mixin for network scan and selection event handlers."""

    client: Any
    session: Any
    call_from_thread: Callable
    push_screen: Callable
    _set_status: Callable
    _refresh_form: Callable

    def on_scan_pressed(self, event: Any) -> None:
        """Start a scan; results open the network picker."""
        self.action_scan()

    def action_scan(self) -> None:
        """Scan for networks in the background."""
        if self.client is None:
            self._set_status("No device connected")
            return
        self._set_status("Scanning for networks...")
        self._scan_networks()

    @work(thread=True, exclusive=True, group="scan")
    def _scan_networks(self) -> None:
        """Run the scan off the UI thread."""
        try:
            networks = self.client.discover_networks()
        except DeviceError as e:
            log.warning(f"Scan failed: {e}")
            self.call_from_thread(self._set_status, f"Scan failed: {e}")
            return
        self.call_from_thread(self._on_networks_found, networks)

    def _on_networks_found(self, networks: list[WiFiNetwork]) -> None:
        """Show the picker with scan results."""
        from ui.modals import NetworkPickerModal

        self._set_status(f"Found {len(networks)} networks")
        self.push_screen(NetworkPickerModal(networks), self._on_network_picked)

    def _on_network_picked(self, network: WiFiNetwork | None) -> None:
        """Handle result from the network picker modal."""
        if network is None:
            return
        try:
            self.session.select_network(network)
        except SessionError as e:
            self._set_status(str(e))
            return
        self._refresh_form()
        self._set_status(f"Selected: {network.ssid}")

    def on_deselect_pressed(self, event: Any) -> None:
        """Go back to typing the SSID by hand."""
        try:
            self.session.deselect_network()
        except SessionError as e:
            self._set_status(str(e))
            return
        self._refresh_form()
        self._set_status("Manual network entry")
