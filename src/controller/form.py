"""Save/reset/quit event handlers."""

from __future__ import annotations

import logging
from typing import Any, Callable

from textual import work

from client import DeviceError
from controller.gate import ValidationResult
from controller.session import PersistenceFailed, SessionError
from model import WiFiSettings

log = logging.getLogger(__name__)


class FormEventsMixin:
    """Mixin for save/reset/quit event handlers."""

    client: Any
    session: Any
    saved: bool
    _saving: bool
    exit: Callable
    call_from_thread: Callable
    _set_status: Callable
    _set_saving: Callable
    _refresh_form: Callable
    _show_errors: Callable
    _sync_ui_from_config: Callable

    def on_save_pressed(self, event: Any) -> None:
        """Validate and save the settings."""
        self.action_save()

    def on_reset_pressed(self, event: Any) -> None:
        """Reload the settings from the device."""
        self.action_reset()

    def on_quit_pressed(self, event: Any) -> None:
        """Exit without saving."""
        self.action_quit()

    def action_save(self) -> None:
        """Submit the draft; a second save while one is running is refused."""
        if self._saving or self.session.in_flight:
            self._set_status("Save already in progress")
            return
        if self.client is None:
            self._set_status("No device connected")
            return
        self._set_saving(True)
        self._set_status("Saving...")
        self._submit_settings()

    @work(thread=True, group="save")
    def _submit_settings(self) -> None:
        """Run validation and the device call off the UI thread."""
        try:
            result = self.session.submit(self.client.update_wifi_settings)
        except PersistenceFailed as e:
            self.call_from_thread(self._on_save_failed, e)
            return
        except SessionError as e:
            self.call_from_thread(self._on_save_refused, e)
            return
        self.call_from_thread(self._on_submit_result, result)

    def _on_submit_result(self, result: ValidationResult) -> None:
        self._set_saving(False)
        self._show_errors(result)
        if result.ok:
            self.saved = True
            self._set_status("Settings saved")
        else:
            count = len(result.errors)
            self._set_status(f"{count} field{'s' if count != 1 else ''} need attention")

    def _on_save_failed(self, error: PersistenceFailed) -> None:
        self._set_saving(False)
        self._set_status(f"{error} (press Save to retry)")

    def _on_save_refused(self, error: SessionError) -> None:
        self._set_saving(False)
        self._set_status(str(error))

    def action_reset(self) -> None:
        """Discard edits and load the device's current settings."""
        if self.client is None:
            self._set_status("No device connected")
            return
        if self._saving:
            self._set_status("Save in progress, try again shortly")
            return
        self._set_status("Loading settings...")
        self._load_settings()

    @work(thread=True, exclusive=True, group="load")
    def _load_settings(self) -> None:
        """Fetch settings off the UI thread."""
        try:
            settings = self.client.get_wifi_settings()
        except DeviceError as e:
            log.warning(f"Load failed: {e}")
            self.call_from_thread(self._set_status, f"Load failed: {e}")
            return
        self.call_from_thread(self._on_settings_loaded, settings)

    def _on_settings_loaded(self, settings: WiFiSettings) -> None:
        log.info(f"Loaded settings {settings!r}")
        try:
            self.session.load(settings)
        except SessionError as e:
            self._set_status(str(e))
            return
        self.saved = False
        self._sync_ui_from_config()
        self._show_errors(None)
        self._refresh_form()
        self._set_status("Settings loaded")

    def action_quit(self) -> None:
        """Exit the app."""
        self.exit()
