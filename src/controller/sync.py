"""ConfigSyncManager: bidirectional UI ↔ EditSession synchronization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from textual.css.query import NoMatches
from textual.widgets import Checkbox, Input

from controller.gate import ValidationResult
from model import WiFiSettings
from ui.ids import css, row_id
import ui.ids as ids

if TYPE_CHECKING:
    from textual.app import App

    from controller.session import EditSession

log = logging.getLogger(__name__)


@dataclass
class FieldMapping:
    """Maps a UI widget to a settings field."""

    widget_id: str
    field_name: str
    widget_type: type  # Checkbox or Input


# Registry of all checkbox/input mappings
FIELD_MAPPINGS: list[FieldMapping] = [
    # Network
    FieldMapping(ids.OPT_SSID, "ssid", Input),
    FieldMapping(ids.OPT_PASSWORD, "password", Input),

    # Device
    FieldMapping(ids.OPT_HOSTNAME, "hostname", Input),
    FieldMapping(ids.OPT_STATIC_IP, "static_ip_config", Checkbox),

    # Static IP
    FieldMapping(ids.OPT_LOCAL_IP, "local_ip", Input),
    FieldMapping(ids.OPT_GATEWAY_IP, "gateway_ip", Input),
    FieldMapping(ids.OPT_SUBNET_MASK, "subnet_mask", Input),
    FieldMapping(ids.OPT_DNS_IP_1, "dns_ip_1", Input),
    FieldMapping(ids.OPT_DNS_IP_2, "dns_ip_2", Input),
]

MAPPINGS_BY_WIDGET: dict[str, FieldMapping] = {m.widget_id: m for m in FIELD_MAPPINGS}


class ConfigSyncManager:
    """Manages bidirectional UI ↔ EditSession synchronization.

    1. **UI → Session** (apply_widget_change, sync_config_from_ui): push
       widget values into the draft through the session, so the schema is
       recomputed after each edit.

    2. **Session → UI** (sync_ui_from_config): write draft values into the
       widgets. Call this after loading settings from the device.

    3. **Schema → UI** (sync_visibility, show_errors): hide fields outside
       the active schema and show validation messages next to inputs.

    Widget caching is used to avoid repeated DOM queries. Call clear_cache()
    when widgets are remounted.
    """

    def __init__(self, app: App, session: EditSession) -> None:
        self.app = app
        self.session = session
        self._widget_cache: dict[str, Checkbox | Input] = {}

    def get_widget(self, widget_id: str, widget_type: type) -> Checkbox | Input | None:
        """Get a widget by ID, using cache if available."""
        if widget_id in self._widget_cache:
            return self._widget_cache[widget_id]
        try:
            widget = self.app.query_one(css(widget_id), widget_type)
            self._widget_cache[widget_id] = widget
            return widget
        except NoMatches:
            return None

    def clear_cache(self) -> None:
        """Clear the widget cache (call when widgets are remounted)."""
        self._widget_cache.clear()

    # =========================================================================
    # UI → Session
    # =========================================================================

    def apply_widget_change(self, widget_id: str | None, value: Any) -> bool:
        """Push one widget's value into the draft.

        Values equal to what the draft already holds are ignored, which keeps
        the Changed events fired by sync_ui_from_config from dirtying a
        freshly loaded session.

        Returns:
            True if the draft changed
        """
        mapping = MAPPINGS_BY_WIDGET.get(widget_id or "")
        if mapping is None:
            return False
        if mapping.widget_type is Checkbox:
            value = bool(value)
        if getattr(self.session.settings, mapping.field_name) == value:
            return False
        self.session.update(mapping.field_name, value)
        return True

    def sync_config_from_ui(self) -> None:
        """Read all UI widgets and update the draft."""
        for mapping in FIELD_MAPPINGS:
            widget = self.get_widget(mapping.widget_id, mapping.widget_type)
            if widget is None:
                continue
            self.apply_widget_change(mapping.widget_id, widget.value)

    # =========================================================================
    # Session → UI
    # =========================================================================

    def sync_ui_from_config(self) -> None:
        """Read the draft and update all UI widgets."""
        settings = self.session.settings
        for mapping in FIELD_MAPPINGS:
            widget = self.get_widget(mapping.widget_id, mapping.widget_type)
            if widget is None:
                continue
            value = getattr(settings, mapping.field_name)
            if mapping.widget_type is Checkbox:
                widget.value = bool(value)
            else:
                widget.value = str(value) if value is not None else ""

    def sync_visibility(self) -> None:
        """Show exactly the inputs the current mode flags call for."""
        from ui.widgets import SelectedNetworkCard

        schema = self.session.schema
        selected = self.session.selected
        try:
            self.app.query_one(css(ids.SELECTED_NETWORK_CARD), SelectedNetworkCard).set_network(selected)
        except NoMatches:
            log.debug("selected-network-card not found")

        # Open networks need no password, so its input is hidden as well
        hidden_rows = {
            ids.OPT_SSID: "ssid" not in schema,
            ids.OPT_PASSWORD: selected is not None and selected.is_open,
        }
        for input_id, hidden in hidden_rows.items():
            self._set_hidden(row_id(input_id), hidden)
        self._set_hidden(ids.STATIC_IP_OPTIONS, not self.session.settings.static_ip_config)

    def _set_hidden(self, widget_id: str, hidden: bool) -> None:
        try:
            widget = self.app.query_one(css(widget_id))
        except NoMatches:
            log.debug(f"{widget_id} not found")
            return
        if hidden:
            widget.add_class("hidden")
        else:
            widget.remove_class("hidden")

    def show_errors(self, result: ValidationResult | None) -> None:
        """Show each field's validation message, clearing the rest."""
        from ui.widgets import FieldRow

        messages = result.messages() if result is not None else {}
        for name, field in WiFiSettings.get_ui_fields().items():
            try:
                row = self.app.query_one(css(row_id(field.input_id)), FieldRow)
            except NoMatches:
                continue
            row.show_error(messages.get(name))
