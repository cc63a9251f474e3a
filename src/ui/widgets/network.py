"""Network discovery widgets: SelectedNetworkCard, NetworkListItem."""

from typing import Callable

from textual import on
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Button, Label, Static

from model import WiFiNetwork
import ui.ids as ids


def signal_bars(rssi: int) -> str:
    """Four-step signal indicator for an RSSI in dBm."""
    if rssi >= -55:
        return "▂▄▆█"
    if rssi >= -67:
        return "▂▄▆ "
    if rssi >= -80:
        return "▂▄  "
    return "▂   "


class SelectedNetworkCard(Container):
    """Shows the picked network in place of the SSID input."""

    def __init__(self, network: WiFiNetwork | None = None) -> None:
        super().__init__(id=ids.SELECTED_NETWORK_CARD, classes="" if network else "hidden")
        self._network = network

    def compose(self) -> ComposeResult:
        yield Label(self._title(), id=ids.SELECTED_NETWORK_SSID)
        yield Static(self._network.describe() if self._network else "", id=ids.SELECTED_NETWORK_DESC)
        yield Button("Manual", id=ids.DESELECT_NETWORK_BTN, variant="default")

    def _title(self) -> str:
        if self._network is None:
            return ""
        lock = "open" if self._network.is_open else "locked"
        return f"{self._network.ssid} ({lock})"

    def set_network(self, network: WiFiNetwork | None) -> None:
        """Show a network, or hide the card with None."""
        self._network = network
        self.query_one(f"#{ids.SELECTED_NETWORK_SSID}", Label).update(self._title())
        self.query_one(f"#{ids.SELECTED_NETWORK_DESC}", Static).update(
            network.describe() if network else ""
        )
        if network is None:
            self.add_class("hidden")
        else:
            self.remove_class("hidden")


class NetworkListItem(Container):
    """A clickable row in the network picker."""

    def __init__(self, network: WiFiNetwork, on_pick: Callable[[WiFiNetwork], None]) -> None:
        super().__init__(classes="network-list-item")
        self.network = network
        self._on_pick = on_pick

    def compose(self) -> ComposeResult:
        yield Label(signal_bars(self.network.rssi), classes="network-signal")
        yield Label(self.network.ssid or "(hidden)", classes="network-ssid")
        yield Static(self.network.describe(), classes="network-desc")
        yield Button("Use", classes="network-pick-btn", variant="primary")

    @on(Button.Pressed, ".network-pick-btn")
    def on_pick_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self._on_pick(self.network)
