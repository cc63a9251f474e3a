"""Main TUI application for netcfg."""

import logging
import os
from pathlib import Path
from typing import Any

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.widgets import (
    Button,
    Checkbox,
    Input,
    Label,
    Static,
    TabbedContent,
    TabPane,
)

from controller import (
    ConfigSyncManager,
    EditSession,
    FormEventsMixin,
    NetworkEventsMixin,
    SessionClosed,
    SubmissionInProgress,
    ValidationResult,
)
from model import WiFiNetwork, WiFiSettings
from model.serializers import settings_to_summary
from ui import compose_summary_tab, compose_wifi_tab, format_active_fields
from ui.ids import css
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / "netcfg"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "netcfg.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

# Load CSS from file
APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class WiFiSettingsApp(
    NetworkEventsMixin,
    FormEventsMixin,
    App,
):
    """TUI for editing a device's WiFi settings."""

    TITLE = "netcfg"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    BINDINGS = [
        Binding("ctrl+s", "save", "Save", show=True),
        Binding("ctrl+r", "reset", "Reset", show=True),
        Binding("ctrl+n", "scan", "Scan", show=True),
        Binding("escape", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        client: Any = None,
        settings: WiFiSettings | None = None,
        selected: WiFiNetwork | None = None,
        device_label: str = "",
    ) -> None:
        """Create the app.

        Args:
            client: DeviceClient (or anything with the same methods); when
                given and no settings are passed, settings are loaded on mount
            settings: Initial settings to edit
            selected: Initially selected network
            device_label: Shown in the header
        """
        super().__init__()
        self.client = client
        self.session = EditSession(settings, selected)
        self.device_label = device_label or getattr(client, "base_url", "")
        self._load_on_mount = client is not None and settings is None
        self._sync_manager: ConfigSyncManager | None = None
        self._saving = False
        self._show_validation = False
        self.saved = False

    def compose(self) -> ComposeResult:
        log.info("compose() called")
        yield Horizontal(
            Label(f"netcfg - {self.device_label or 'no device'}", id=ids.HEADER_TITLE),
            Button("Scan", id=ids.SCAN_BTN, variant="default"),
            id=ids.HEADER_CONTAINER,
        )

        with TabbedContent(id=ids.CONFIG_TABS):
            with TabPane("WiFi", id="wifi-tab"):
                yield from compose_wifi_tab(self.session.settings, self.session.selected)

            with TabPane("Summary", id="summary-tab"):
                yield from compose_summary_tab(
                    self._summary_text(),
                    format_active_fields(self.session.schema),
                )

        yield Horizontal(
            Static("", id=ids.STATUS_BAR),
            Button("Save [^S]", id=ids.SAVE_BTN, variant="success"),
            Button("Reset [^R]", id=ids.RESET_BTN, variant="default"),
            Button("Quit [Esc]", id=ids.QUIT_BTN, variant="error"),
            id=ids.FOOTER_BUTTONS,
        )

    # =========================================================================
    # Status and Form State
    # =========================================================================

    def _set_status(self, message: str) -> None:
        """Set status bar message."""
        try:
            status = self.query_one(css(ids.STATUS_BAR), Static)
            status.update(message)
        except NoMatches:
            pass

    def _set_saving(self, saving: bool) -> None:
        """Track an outstanding save; the form and Save button are locked meanwhile."""
        self._saving = saving
        for widget_id in (ids.SAVE_BTN, ids.WIFI_TAB_CONTENT, ids.SCAN_BTN):
            try:
                self.query_one(css(widget_id)).disabled = saving
            except NoMatches:
                pass

    def _get_sync_manager(self) -> ConfigSyncManager:
        """Get or create the sync manager."""
        if self._sync_manager is None:
            self._sync_manager = ConfigSyncManager(self, self.session)
        return self._sync_manager

    def _sync_ui_from_config(self) -> None:
        """Sync the inputs to reflect the current draft."""
        sync = self._get_sync_manager()
        sync.clear_cache()
        sync.sync_ui_from_config()

    def _show_errors(self, result: ValidationResult | None) -> None:
        """Show validation messages; once shown, they follow every edit."""
        self._show_validation = result is not None and not result.ok
        self._get_sync_manager().show_errors(result)

    def _summary_text(self) -> str:
        """Summary of exactly what Save would send."""
        return settings_to_summary(self.session.settings, ssid=self.session.payload()["ssid"])

    def _refresh_form(self) -> None:
        """Apply the active schema to the form and update the summary."""
        self._get_sync_manager().sync_visibility()
        if self._show_validation:
            self._get_sync_manager().show_errors(self.session.validate())
        try:
            self.query_one(css(ids.SETTINGS_SUMMARY), Static).update(self._summary_text())
            self.query_one(css(ids.ACTIVE_FIELDS), Static).update(
                format_active_fields(self.session.schema)
            )
        except NoMatches:
            pass

    # =========================================================================
    # Event Handlers - Checkboxes and Inputs
    # =========================================================================

    def _apply_widget_change(self, widget_id: str | None, value: Any) -> None:
        """Push an edit into the session and re-derive the form."""
        try:
            changed = self._get_sync_manager().apply_widget_change(widget_id, value)
        except SessionClosed:
            self._set_status("Settings already saved - press Reset to edit again")
            return
        except SubmissionInProgress:
            # Put the widget back to what is being saved
            self._set_status("Save in progress, edit again once it finishes")
            self._sync_ui_from_config()
            return
        if changed:
            self._refresh_form()

    @on(Checkbox.Changed)
    def on_checkbox_changed(self, event: Checkbox.Changed) -> None:
        """Handle checkbox changes."""
        self._apply_widget_change(event.checkbox.id, event.value)

    @on(Input.Changed)
    def on_input_changed(self, event: Input.Changed) -> None:
        """Handle input changes."""
        self._apply_widget_change(event.input.id, event.value)

    # =========================================================================
    # Mixin Handler Forwarding
    # =========================================================================
    # Textual's @on decorator only registers handlers defined on the class itself,
    # not on mixins. These forwarding handlers ensure events are routed to mixins.

    # Network handlers (from NetworkEventsMixin)
    @on(Button.Pressed, css(ids.SCAN_BTN))
    def _on_scan_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_scan_pressed(event)

    @on(Button.Pressed, css(ids.DESELECT_NETWORK_BTN))
    def _on_deselect_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_deselect_pressed(event)

    # Form handlers (from FormEventsMixin)
    @on(Button.Pressed, css(ids.SAVE_BTN))
    def _on_save_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_save_pressed(event)

    @on(Button.Pressed, css(ids.RESET_BTN))
    def _on_reset_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_reset_pressed(event)

    @on(Button.Pressed, css(ids.QUIT_BTN))
    def _on_quit_btn(self, event: Button.Pressed) -> None:
        """Forward to mixin handler."""
        self.on_quit_pressed(event)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        self._refresh_form()
        if self._load_on_mount:
            self.action_reset()
