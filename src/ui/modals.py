"""Modal dialogs for network selection."""

from __future__ import annotations

from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from model import WiFiNetwork
from ui.widgets import NetworkListItem
import ui.ids as ids


class NetworkPickerModal(ModalScreen[WiFiNetwork | None]):
    """Modal listing scanned networks; dismisses with the one picked."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, networks: list[WiFiNetwork]) -> None:
        super().__init__()
        self.networks = networks

    def compose(self) -> ComposeResult:
        with Vertical(id=ids.NETWORK_PICKER):
            yield Label("Select Network", id=ids.MODAL_TITLE)
            with VerticalScroll(id=ids.NETWORK_LIST):
                if self.networks:
                    for network in self.networks:
                        yield NetworkListItem(network, self.dismiss)
                else:
                    yield Static("No networks found", id=ids.NO_NETWORKS)
            with Horizontal(id=ids.MODAL_BUTTONS):
                yield Button("Cancel", id=ids.MODAL_CANCEL_BTN, variant="default")

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, f"#{ids.MODAL_CANCEL_BTN}")
    def on_cancel(self, event: Button.Pressed) -> None:
        self.dismiss(None)
