"""Tab composition functions for the TUI."""

from ui.tabs.summary import compose_summary_tab, format_active_fields
from ui.tabs.wifi import compose_wifi_tab

__all__ = [
    "compose_summary_tab",
    "compose_wifi_tab",
    "format_active_fields",
]
