"""UI module containing widgets, styles, and tab compositions."""

from ui.widgets import (
    FieldRow,
    NetworkListItem,
    OptionCard,
    SelectedNetworkCard,
    signal_bars,
)
from ui.tabs import (
    compose_summary_tab,
    compose_wifi_tab,
    format_active_fields,
)
from ui.modals import NetworkPickerModal
from ui import ids

__all__ = [
    # Widgets
    "FieldRow",
    "NetworkListItem",
    "OptionCard",
    "SelectedNetworkCard",
    "signal_bars",
    # Tab composers
    "compose_summary_tab",
    "compose_wifi_tab",
    "format_active_fields",
    # Modals
    "NetworkPickerModal",
]
