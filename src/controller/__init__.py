"""Controller layer: validation engine and the glue between UI and model.

This package contains:
- validators, schema, gate: pure validation of WiFi settings
- session: EditSession state machine owning the draft
- sync: ConfigSyncManager for bidirectional UI ↔ session sync
- Event handler mixins for different UI areas
"""

from controller.validators import is_hostname, is_ip, max_length, optional
from controller.schema import FieldRule, compose_schema, password_required
from controller.gate import (
    FieldError,
    InvalidFormat,
    MissingRequired,
    ValidationResult,
    validate,
)
from controller.session import (
    EditSession,
    PersistenceFailed,
    SessionClosed,
    SessionError,
    SessionState,
    SubmissionInProgress,
)
from controller.sync import ConfigSyncManager, FieldMapping, FIELD_MAPPINGS
from controller.form import FormEventsMixin
from controller.network import NetworkEventsMixin

__all__ = [
    # Validators
    "is_hostname",
    "is_ip",
    "max_length",
    "optional",
    # Schema
    "FieldRule",
    "compose_schema",
    "password_required",
    # Gate
    "FieldError",
    "InvalidFormat",
    "MissingRequired",
    "ValidationResult",
    "validate",
    # Session
    "EditSession",
    "PersistenceFailed",
    "SessionClosed",
    "SessionError",
    "SessionState",
    "SubmissionInProgress",
    # Sync
    "ConfigSyncManager",
    "FieldMapping",
    "FIELD_MAPPINGS",
    # Event mixins
    "FormEventsMixin",
    "NetworkEventsMixin",
]
