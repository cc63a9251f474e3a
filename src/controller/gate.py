"""Validation of settings against the active schema before saving."""

from __future__ import annotations

from dataclasses import dataclass, field

from controller.schema import FieldRule
from model import WiFiSettings


@dataclass(frozen=True)
class FieldError:
    """A user-correctable problem with one field."""

    field: str

    @property
    def message(self) -> str:
        return f"{self.field} is invalid"


@dataclass(frozen=True)
class MissingRequired(FieldError):
    """A required field was left empty."""

    label: str = ""

    @property
    def message(self) -> str:
        return f"{self.label or self.field} is required"


@dataclass(frozen=True)
class InvalidFormat(FieldError):
    """A non-empty value failed its field's validator.

    The offending value is deliberately not stored, so a rejected password
    can't end up in a log line.
    """

    reason: str = "Invalid value"

    @property
    def message(self) -> str:
        return self.reason


@dataclass
class ValidationResult:
    """Outcome of validating settings: every failing field, not just the first."""

    errors: dict[str, FieldError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def messages(self) -> dict[str, str]:
        """Error text per field, for display."""
        return {name: error.message for name, error in self.errors.items()}

    def __bool__(self) -> bool:
        return self.ok


def validate(schema: dict[str, FieldRule], settings: WiFiSettings) -> ValidationResult:
    """Check every active field of settings against its rule.

    A field fails with MissingRequired when it is required and empty, or with
    InvalidFormat when it has a value its validator rejects. Fields not in
    the schema are never looked at. Settings are not modified.
    """
    labels = {name: f.label for name, f in WiFiSettings.get_ui_fields().items()}
    result = ValidationResult()
    for name, rule in schema.items():
        value = getattr(settings, name, "")
        if value is None or value == "":
            if rule.required:
                result.errors[name] = MissingRequired(name, label=labels.get(name, ""))
            continue
        if not rule.validator(value):
            result.errors[name] = InvalidFormat(name, reason=rule.message)
    return result
