"""EditSession: one editing pass over a device's WiFi settings.

State machine:

    CLEAN --edit--> DIRTY --submit--> VALIDATING --invalid--> DIRTY
                                          |
                                          +--valid, saved--> SUBMITTED
                                          +--valid, save failed--> DIRTY

SUBMITTED is terminal for the draft; load() starts a fresh one at CLEAN.
While a submission is in flight the draft is frozen: edits, selection
changes and reloads raise SubmissionInProgress.
The active schema is recomputed synchronously after every mutation, so it
always matches the current mode flags.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Any, Callable

from controller.gate import ValidationResult, validate
from controller.schema import FieldRule, compose_schema
from model import WiFiNetwork, WiFiSettings
from model.serializers import to_payload

log = logging.getLogger(__name__)


class SessionState(Enum):
    """Lifecycle of a draft."""

    CLEAN = "clean"
    DIRTY = "dirty"
    VALIDATING = "validating"
    SUBMITTED = "submitted"


class SessionError(Exception):
    """Base class for editing session errors."""


class SubmissionInProgress(SessionError):
    """Raised when submit() is called while a save is still outstanding."""


class SessionClosed(SessionError):
    """Raised when editing or submitting a draft that was already saved."""


class PersistenceFailed(SessionError):
    """Raised when the device rejected or never received the save.

    The draft is left untouched in DIRTY, so the user can simply try again.
    """

    retryable = True

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Saving settings failed: {cause}")
        self.cause = cause


class EditSession:
    """Owns the draft, the network selection and the derived schema.

    Example usage:
        session = EditSession(client.get_wifi_settings())
        session.update("hostname", "device-01")
        session.set_static_ip(True)
        result = session.submit(client.update_wifi_settings)
        if not result.ok:
            show(result.messages())
    """
    def __init__(self, settings: WiFiSettings | None = None, selected: WiFiNetwork | None = None) -> None:
        self.settings = settings if settings is not None else WiFiSettings()
        self.selected = selected
        self.state = SessionState.CLEAN
        self.last_result = ValidationResult()
        self._in_flight = False
        # Guards the draft between the UI thread and a save worker
        self._lock = threading.RLock()
        self.schema: dict[str, FieldRule] = compose_schema(self.selected, self.settings)

    # =========================================================================
    # Mutations
    # =========================================================================

    def _ensure_editable(self) -> None:
        if self._in_flight:
            raise SubmissionInProgress("Settings are being saved; wait for the save to finish")
        if self.state is SessionState.SUBMITTED:
            raise SessionClosed("Settings were already saved; load them again to edit")

    def _changed(self) -> None:
        self.schema = compose_schema(self.selected, self.settings)
        if self.state is SessionState.CLEAN:
            self.state = SessionState.DIRTY

    def update(self, name: str, value: Any) -> None:
        """Set one field of the draft."""
        if name not in WiFiSettings.get_ui_fields():
            raise KeyError(name)
        with self._lock:
            self._ensure_editable()
            setattr(self.settings, name, value)
            self._changed()

    def set_static_ip(self, enabled: bool) -> None:
        """Toggle static IP. Address values are kept either way."""
        self.update("static_ip_config", bool(enabled))

    def select_network(self, network: WiFiNetwork) -> None:
        """Use a scanned network; its SSID replaces manual entry."""
        with self._lock:
            self._ensure_editable()
            log.info(f"Selected network {network.ssid!r} ({network.security_mode})")
            self.selected = network
            self._changed()

    def deselect_network(self) -> None:
        """Return to manual SSID entry with whatever was typed before."""
        with self._lock:
            self._ensure_editable()
            log.info("Network deselected, manual SSID entry")
            self.selected = None
            self._changed()

    def load(self, settings: WiFiSettings) -> None:
        """Start over from freshly loaded settings."""
        with self._lock:
            if self._in_flight:
                raise SubmissionInProgress("Cannot reload while a save is in progress")
            self.settings = settings
            self.selected = None
            self.state = SessionState.CLEAN
            self.last_result = ValidationResult()
            self.schema = compose_schema(self.selected, self.settings)

    # =========================================================================
    # Validation and Submission
    # =========================================================================

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def validate(self) -> ValidationResult:
        """Validate the draft against the current schema without saving."""
        with self._lock:
            self.last_result = validate(self.schema, self.settings)
            return self.last_result

    def payload(self) -> dict[str, Any]:
        """The complete record handed to the device.

        Inactive static IP fields are included unchanged; a selected network
        supplies the SSID.
        """
        with self._lock:
            data = to_payload(self.settings)
            if self.selected is not None:
                data["ssid"] = self.selected.ssid
            return data

    def submit(self, save: Callable[[dict[str, Any]], Any]) -> ValidationResult:
        """Validate, then hand the payload to ``save`` if everything passed.

        The payload is taken in the same step as validation, and the draft
        stays frozen until ``save`` returns, so what is sent is exactly what
        was validated.

        Args:
            save: Persists a payload; any exception it raises counts as failure

        Returns:
            The validation result; on success the session is SUBMITTED

        Raises:
            SubmissionInProgress: a previous submit() has not returned yet
            SessionClosed: the draft was already submitted
            PersistenceFailed: validation passed but save raised
        """
        with self._lock:
            if self._in_flight:
                raise SubmissionInProgress("A save is already in progress")
            if self.state is SessionState.SUBMITTED:
                raise SessionClosed("Settings were already saved; load them again to submit")

            self.state = SessionState.VALIDATING
            result = self.validate()
            if not result.ok:
                log.info(f"Validation failed for: {', '.join(result.errors)}")
                self.state = SessionState.DIRTY
                return result
            payload = self.payload()
            self._in_flight = True

        log.info(f"Saving settings {self.settings!r}")
        try:
            save(payload)
        except Exception as e:
            log.warning(f"Save failed: {e}")
            with self._lock:
                self.state = SessionState.DIRTY
                self._in_flight = False
            raise PersistenceFailed(e) from e

        with self._lock:
            self.state = SessionState.SUBMITTED
            self._in_flight = False
        return result
