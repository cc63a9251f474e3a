"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"


def error_id(input_id: str) -> str:
    """ID of the error label shown under a field's input."""
    return f"{input_id}-error"


def row_id(input_id: str) -> str:
    """ID of the container holding a field's label, input and error."""
    return f"{input_id}-row"


# Container IDs
HEADER_CONTAINER = "header-container"
HEADER_TITLE = "header-title"
CONFIG_TABS = "config-tabs"
FOOTER_BUTTONS = "footer-buttons"
STATUS_BAR = "status-bar"

# WiFi tab IDs
WIFI_TAB_CONTENT = "wifi-tab-content"
SELECTED_NETWORK_CARD = "selected-network-card"
SELECTED_NETWORK_SSID = "selected-network-ssid"
SELECTED_NETWORK_DESC = "selected-network-desc"
DESELECT_NETWORK_BTN = "deselect-network-btn"
STATIC_IP_OPTIONS = "static-ip-options"

# Summary tab IDs
SUMMARY_TAB_CONTENT = "summary-tab-content"
SETTINGS_SUMMARY = "settings-summary"
ACTIVE_FIELDS = "active-fields"

# Network picker modal IDs
NETWORK_PICKER = "network-picker"
NETWORK_LIST = "network-list"
NO_NETWORKS = "no-networks"
MODAL_TITLE = "modal-title"
MODAL_BUTTONS = "modal-buttons"
MODAL_CANCEL_BTN = "modal-cancel-btn"

# Action buttons
SCAN_BTN = "scan-btn"
SAVE_BTN = "save-btn"
RESET_BTN = "reset-btn"
QUIT_BTN = "quit-btn"

# Option checkbox/input IDs (used by UIField and FieldMapping)
OPT_SSID = "opt-ssid"
OPT_PASSWORD = "opt-password"
OPT_HOSTNAME = "opt-hostname"
OPT_STATIC_IP = "opt-static-ip"
OPT_LOCAL_IP = "opt-local-ip"
OPT_GATEWAY_IP = "opt-gateway-ip"
OPT_SUBNET_MASK = "opt-subnet-mask"
OPT_DNS_IP_1 = "opt-dns-ip-1"
OPT_DNS_IP_2 = "opt-dns-ip-2"
