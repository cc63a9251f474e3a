"""UIField descriptor for settings classes with UI and wire metadata.

This module implements Python's descriptor protocol to create fields that:
1. Store setting values (like regular instance attributes)
2. Carry UI metadata (widget IDs, labels, explanations)
3. Know their name on the device's REST API

The Descriptor Pattern
----------------------
Python descriptors are objects that define __get__, __set__, and optionally
__delete__ methods. When a descriptor is assigned to a class attribute, Python
intercepts attribute access and delegates to these methods.

We need settings fields that are both data containers AND metadata
containers. Keeping the label, input ID and secrecy of a field next to its
value means the form, the sync layer and the serializer can never disagree
about which fields exist.

Architecture Overview
---------------------
                    ┌─────────────────┐
                    │  ConfigBase     │  __init__, __eq__, __repr__,
                    │                 │  get_*_fields(), values()
                    └────────┬────────┘
                             │
                             ▼
                    ┌─────────────────┐
                    │  WiFiSettings   │
                    │                 │
                    │ ssid=...        │
                    │ static_ip_...   │
                    └─────────────────┘
                             │
                  Uses UIField descriptors

Usage Examples
--------------
Defining a settings class with UIField:

    class WiFiSettings(ConfigBase):
        hostname = UIField(
            type_=str,
            default="",
            input_id="opt-hostname",
            label="Hostname",
            explanation="Name the device announces on the network",
        )

Using the settings:

    settings = WiFiSettings()
    settings.hostname = "device-01"   # Set value
    print(settings.hostname)          # Get value: "device-01"

    # Access metadata (via class, not instance)
    field = WiFiSettings.hostname
    print(field.input_id)             # "opt-hostname"

Integration Points
------------------
1. ConfigSyncManager (controller/sync.py): Uses input_id to find widgets,
   syncs values bidirectionally between UI and settings.

2. Serialization (model/serializers.py): Iterates _ui_fields to convert
   settings to and from the device's JSON payload.

3. UI composition (ui/tabs/wifi.py): Uses UIField metadata to create FieldRow
   widgets with correct labels, IDs, and explanations.
"""

from typing import Any

from constants import REDACTED


class UIField:
    """Descriptor that holds field value + all metadata.

    When accessed on the class, returns the UIField itself (with metadata).
    When accessed on an instance, returns the actual value.
    """

    def __init__(
        self,
        type_: type,
        default: Any,
        input_id: str,
        label: str,
        explanation: str,
        *,
        secret: bool = False,
        placeholder: str = "",
    ):
        """Create a UIField descriptor.

        Args:
            type_: The Python type of this field (bool or str)
            default: Default value for the field
            input_id: The Textual widget ID for this field's input or checkbox
            label: Short label shown next to the widget
            explanation: Explanation text shown below the widget
            secret: Value is masked in the UI and redacted in logs
            placeholder: Placeholder text for input widgets
        """
        self.type_ = type_
        self.default = default
        self.input_id = input_id
        self.label = label
        self.explanation = explanation
        self.secret = secret
        self.placeholder = placeholder
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self.name = name
        # Register field with owner class
        if "_ui_fields" not in owner.__dict__:
            owner._ui_fields = {}
        owner._ui_fields[name] = self

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        """Get the field value or the descriptor itself.

        - Class access (obj is None): returns UIField with metadata
        - Instance access: returns the actual value
        """
        if obj is None:
            return self
        return obj.__dict__.get(self.name, self.default)

    def __set__(self, obj: Any, value: Any) -> None:
        """Set the field value on an instance."""
        obj.__dict__[self.name] = value

    def display_value(self, value: Any) -> Any:
        """Value as it may appear in logs and printed output."""
        if self.secret and value:
            return REDACTED
        return value


class ConfigBase:
    """Base class for UIField-based settings classes."""

    _ui_fields: dict[str, UIField]

    def __init__(self, **kwargs: Any) -> None:
        """Initialize settings with optional field values."""
        all_fields = self.get_ui_fields()
        for name, value in kwargs.items():
            if name in all_fields:
                setattr(self, name, value)

    @classmethod
    def get_ui_fields(cls) -> dict[str, UIField]:
        """Get all UIField descriptors for this class."""
        return getattr(cls, "_ui_fields", {})

    def values(self) -> dict[str, Any]:
        """Current value of every field, keyed by field name."""
        return {name: getattr(self, name) for name in self.get_ui_fields()}

    def redacted(self) -> dict[str, Any]:
        """Like values(), with secret fields masked."""
        return {
            name: field.display_value(getattr(self, name))
            for name, field in self.get_ui_fields().items()
        }

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.values() == other.values()

    def __repr__(self) -> str:
        parts = ", ".join(f"{k}={v!r}" for k, v in self.redacted().items())
        return f"{type(self).__name__}({parts})"
